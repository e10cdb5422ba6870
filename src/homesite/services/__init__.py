"""Service layer: site operations returning :class:`ServiceResult`."""
