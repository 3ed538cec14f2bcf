"""Service layer: lookup operations wrapped in ServiceResult."""
