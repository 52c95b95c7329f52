"""One-off migration script: JSON store file -> SQL store, keeping ids."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote guestbook seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guestbook.core.config import get_settings
from guestbook.repositories import JsonEntryStore, SQLEntryStore


def migrate(json_path: Path) -> int:
    if not json_path.exists():
        raise SystemExit(f"Arquivo nao encontrado: {json_path}")
    source = JsonEntryStore(json_path)
    target = SQLEntryStore()
    target.ensure_ready()
    count = 0
    for entry in source.list():
        target.upsert(entry)
        count += 1
    return count


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Migrar entradas do JSON para o banco SQL (DATABASE_URL)")
    ap.add_argument("--source", default=get_settings().json_store_path, help="Arquivo JSON de origem")
    args = ap.parse_args(argv)
    count = migrate(Path(args.source))
    print(f"Migracao concluida: {count} entradas copiadas.")


if __name__ == "__main__":
    main()
