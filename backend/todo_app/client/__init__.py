"""Client Layer — HTTP consumer of the todo API and its terminal front end.

Invariants:
    - Talks to the server only over HTTP (never imports services/ or infrastructure/)
    - Local list is a cache; every successful mutation triggers a full re-fetch
"""
