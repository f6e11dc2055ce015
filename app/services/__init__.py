"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services validate parent references, apply null-safe partial updates,
and map models to response schemas. They flush through repositories;
routers commit the transaction.
"""
