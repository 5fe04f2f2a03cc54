"""Service layer: builds domain objects and reports outcomes as ServiceResult."""
