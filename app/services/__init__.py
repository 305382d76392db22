"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate input against other records, call repositories and
convert ORM models to response schemas. Routers own the commit.
"""
