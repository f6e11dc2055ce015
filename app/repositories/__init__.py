"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer for the portfolio tables.
Each module exposes a singleton repository extending BaseRepository
with entity-specific queries (profile-scoped listings, name lookups).
"""
