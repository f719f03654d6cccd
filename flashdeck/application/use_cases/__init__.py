from .delete_user_data import DeleteUserDataUseCase, DeletionReport
from .forget_identity import ForgetIdentityUseCase

__all__ = ["DeleteUserDataUseCase", "DeletionReport", "ForgetIdentityUseCase"]
