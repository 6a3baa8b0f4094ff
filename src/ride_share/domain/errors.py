# ride_share/domain/errors.py


class RideOwnershipError(RuntimeError):
    """Raised when a ride that already has an owner is handed to another one."""
