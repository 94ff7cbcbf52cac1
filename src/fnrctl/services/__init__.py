"""Service layer — wraps domain calls in the ServiceResult contract."""
