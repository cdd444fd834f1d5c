"""Core models."""

from .request import RequestContext, UploadedFile
from .view import ShopViewData, ViewResult

__all__ = ["RequestContext", "ShopViewData", "UploadedFile", "ViewResult"]
