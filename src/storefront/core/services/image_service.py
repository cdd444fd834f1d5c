"""Storage of product images posted with a form."""

import uuid
from pathlib import Path

from loguru import logger

from src.storefront.core.errors import ValidationError
from src.storefront.core.models import RequestContext, UploadedFile
from src.storefront.entities import Image
from src.storefront.runtime.context import get_config


class ImageUploadService:
    """Turns the files uploaded with a request into stored Image entities."""

    def __init__(
        self,
        upload_dir: Path | str | None = None,
        allowed_extensions: list[str] | None = None,
    ) -> None:
        images_config = get_config().images
        self._upload_dir = Path(upload_dir or images_config.upload_dir)
        self._allowed_extensions = {
            ext.lower() for ext in (allowed_extensions or images_config.allowed_extensions)
        }

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def get_uploaded_images(self, request: RequestContext) -> list[Image]:
        """Store every non-empty upload and return the images in upload order."""
        uploads = [upload for upload in request.files if upload.content]
        for upload in uploads:
            self._check_extension(upload)

        images = [self._store(upload) for upload in uploads]
        if images:
            logger.info("Stored {} uploaded images in {}", len(images), self._upload_dir)
        return images

    def path_for(self, image: Image) -> Path:
        return self._upload_dir / image.file_name

    def discard(self, images: list[Image]) -> None:
        """Remove the stored files of images that were never saved."""
        for image in images:
            self.path_for(image).unlink(missing_ok=True)
        if images:
            logger.info("Discarded {} unsaved uploaded images", len(images))

    def _check_extension(self, upload: UploadedFile) -> None:
        extension = Path(upload.filename).suffix.lower()
        if extension not in self._allowed_extensions:
            raise ValidationError(
                f"File type {extension or '(none)'} is not allowed for {upload.filename}",
                field="image",
            )

    def _store(self, upload: UploadedFile) -> Image:
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        file_name = f"{uuid.uuid4().hex}{Path(upload.filename).suffix.lower()}"
        (self._upload_dir / file_name).write_bytes(upload.content)
        logger.debug("Stored upload {} as {}", upload.filename, file_name)
        return Image(file_name=file_name, description=Path(upload.filename).name)
