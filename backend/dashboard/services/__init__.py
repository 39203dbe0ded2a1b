"""Services Layer: the mutation coordinator and the credential exchange.

Invariants:
    - Services depend on core protocols, never on concrete repositories
    - Every operation returns a MutationOutcome (or sign-in message); storage
      failures never escape as exceptions

Design Decisions:
    - One mutations class per entity (3 operations each) sharing mutation_flow
"""
