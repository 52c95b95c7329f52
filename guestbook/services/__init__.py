"""
Use cases for the guestbook API.

Routers call these services instead of touching repositories or stores
directly; business rules (validation today, authorization tomorrow) go here.
"""
