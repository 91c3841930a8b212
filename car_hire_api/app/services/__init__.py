"""
Service layer abstraction.

Services hold the car hire business rules: age eligibility, the
driver age surcharge and the update/delete semantics.  Handlers in
``api/v1/endpoints`` translate HTTP requests into service calls.
"""
