#!/usr/bin/env python3
"""
Cadastrar uma entrada no guestbook usando o store configurado (STORAGE_BACKEND).

Uso:
  STORAGE_BACKEND=sql python scripts/add_entry.py --user john --comment "Great Comment"
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Garantir que o pacote guestbook seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guestbook.core.config import get_settings
from guestbook.domain.entries import Entry, EntryError
from guestbook.repositories import EntryRepository, build_store
from guestbook.services.entry_service import EntryService


def main(argv: list[str] | None = None) -> Entry:
    ap = argparse.ArgumentParser(description="Adicionar entrada ao guestbook")
    ap.add_argument("--user", required=True, help="Autor (ex.: john)")
    ap.add_argument("--comment", required=True, help="Texto do comentario")
    args = ap.parse_args(argv)

    settings = get_settings()
    store = build_store(settings)
    service = EntryService(EntryRepository(store), strict_updates=settings.strict_updates)
    try:
        entry = service.create(Entry(user=args.user, comment=args.comment))
    except EntryError as exc:
        raise SystemExit(f"Entrada invalida: {exc}")
    print(f"OK: entrada {entry.id} cadastrada no store '{store.name}'")
    return entry


if __name__ == "__main__":
    main()
