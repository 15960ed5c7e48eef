from .promise_all import gather_all

__all__ = ["gather_all"]
