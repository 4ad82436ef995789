"""Service layer — conversions wrapped in the ServiceResult contract."""
