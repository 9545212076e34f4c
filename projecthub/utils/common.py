import os
import shutil
import time
from typing import Type, TypeVar, Optional, Any

from sqlalchemy.orm import Session

from projecthub.config.settings import settings
from projecthub.constants import ALLOWED_UPLOAD_EXTENSIONS
from projecthub.exceptions import raise_not_found, raise_file_type_not_allowed, raise_internal_error
from projecthub.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

def get_object_or_404(db: Session, model: Type[T], obj_id: Any, msg: str = "Object not found") -> T:
    """
    Retrieves an object by ID or raises a 404 HTTPException.
    """
    obj = db.query(model).filter(model.id == obj_id).first()
    if not obj:
        raise_not_found(msg)
    return obj

def is_allowed_file(filename: str) -> bool:
    ext = os.path.splitext(filename or "")[1].lower()
    return ext in ALLOWED_UPLOAD_EXTENSIONS

def save_uploaded_file(upload_file: Any) -> Optional[str]:
    """
    Stores an uploaded file as <epoch-ms>-<original name> in the upload directory.
    Returns the stored path, or None when nothing was uploaded.
    """
    if not upload_file or not getattr(upload_file, "filename", None):
        return None

    original_name = os.path.basename(upload_file.filename)
    if not is_allowed_file(original_name):
        raise_file_type_not_allowed()

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    stored_name = f"{int(time.time() * 1000)}-{original_name}"
    file_path = os.path.join(settings.UPLOAD_DIR, stored_name)
    try:
        with open(file_path, "wb") as buffer:
            shutil.copyfileobj(upload_file.file, buffer)
    except OSError as e:
        logger.error(f"Failed to save uploaded file: {str(e)}")
        raise_internal_error("File upload failed")
    return file_path

def remove_stored_file(file_path: Optional[str]):
    """
    Deletes a stored upload whose database row was never written.
    """
    if not file_path:
        return
    try:
        os.remove(file_path)
    except FileNotFoundError:
        logger.warning(f"Stored file already gone: {file_path}")

def build_file_url(file_path: Optional[str]) -> Optional[str]:
    if not file_path:
        return None
    base = settings.PUBLIC_BASE_URL.rstrip("/")
    return f"{base}/uploads/{os.path.basename(file_path)}"
