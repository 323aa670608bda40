"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
Each repository extends BaseRepository for generic CRUD, paging and search,
and adds the entity's own lookups. Repositories hold no session; the caller
passes one on every call.
"""
