"""Infrastructure Layer — database session management, SQL Record Store, logging.

Invariants:
    - All IO lives here or in services/; core/ stays pure
"""
