"""Services Layer — the todo service, the only component with business rules.

Invariants:
    - Services talk to storage only through repository protocols
    - Domain failures raised as TodoAppError subclasses, infrastructure errors pass through
"""
