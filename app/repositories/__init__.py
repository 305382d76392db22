"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
student, faculty and avatar repositories extend BaseRepository for
generic CRUD and add their own filters and aggregates.
"""
