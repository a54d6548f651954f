from .manage_owned import ManageOwnedResourceUseCase

__all__ = ["ManageOwnedResourceUseCase"]
