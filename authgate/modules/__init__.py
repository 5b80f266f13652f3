"""
Feature modules of authgate.

- auth: the Auth service, its events and collaborator interfaces
- authz: authorization strategies (Levels, Groups)
- session: session bridges carrying auth info between requests
- users: user models and the partial login wrapper
- confirmation: confirmation tokens (verify e-mail, reset password)

A module exposes its protocols in interfaces.py and its errors in
exceptions.py. Other modules depend on those, not on implementations.
"""
