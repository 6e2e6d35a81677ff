"""
Service layer abstraction.

Services encapsulate the business logic of a domain and return
explicit result values.  Storage lives behind ``ProductStore`` so it
can be swapped for a persistent repository without touching the API
handlers.
"""
