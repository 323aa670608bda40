"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Each entity has one facade exposing the uniform operation set
(find_all / find / create / update / delete). Facades validate input,
call repositories, translate storage errors and build response envelopes.
"""
