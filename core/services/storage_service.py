# =============================================================================
# core/services/storage_service.py - Object Storage Operations
# =============================================================================
# Uploads, streams and deletes file assets in the Supabase Storage bucket.
#
# Key scheme:
#   object key    public/<folder>/<epoch_ms>-<random><ext>
#   serving path  /storage/<folder>/<epoch_ms>-<random><ext>
#
# The timestamp + random suffix keeps keys unique without a shared counter.
# Writes and deletes go through the Supabase client; reads stream straight
# from the Storage REST API with httpx so large files never sit in memory.
# =============================================================================

import logging
import random
import time

import httpx
from supabase import Client

from app.exceptions import (
    ObjectNotFoundError,
    StorageDownloadError,
    StorageNotConfiguredError,
    StorageUploadError,
)
from core.models.storage import ObjectStream, UploadResult

logger = logging.getLogger(__name__)

# Logical folders an upload may land in
FOLDERS = ("uploads", "content", "candidates", "templates", "applications")

OBJECT_PREFIX = "public"
SERVING_PREFIX = "/storage"
LEGACY_SERVING_PREFIX = "/objects"

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Storage API answers 400 for missing objects on older deployments
MISSING_OBJECT_STATUSES = (400, 404)


def file_extension(filename: str) -> str:
    """Everything from the last dot, case preserved ("photo.PNG" -> ".PNG"); "" if none."""
    dot = filename.rfind(".")
    return filename[dot:] if dot != -1 else ""


def generate_filename(
    original_filename: str,
    now_ms: int | None = None,
    rand: int | None = None,
) -> str:
    """
    Build a collision-resistant filename keeping the original extension.

    Args:
        original_filename: Client-supplied name, used only for its extension
        now_ms: Override for the millisecond timestamp (tests)
        rand: Override for the random component (tests)
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if rand is None:
        rand = random.randint(0, 1_000_000_000)
    return f"{now_ms}-{rand}{file_extension(original_filename)}"


def build_object_name(folder: str, filename: str) -> str:
    """Bucket key for a generated filename inside a logical folder."""
    return f"{OBJECT_PREFIX}/{folder}/{filename}"


def is_servable(folder: str, filename: str) -> bool:
    """True if folder/filename names an object inside one of the public folders."""
    if folder not in FOLDERS:
        return False
    if filename in ("", ".", "..") or "/" in filename or "\\" in filename:
        return False
    return True


def object_name_for(path: str) -> str:
    """
    Translate a public path back to its bucket key.

    Both /storage/<folder>/<name> and the legacy /objects/<folder>/<name>
    map to public/<folder>/<name>; anything else is assumed to already be a key.
    """
    for prefix in (SERVING_PREFIX, LEGACY_SERVING_PREFIX):
        if path.startswith(prefix + "/"):
            return OBJECT_PREFIX + path[len(prefix):]
    return path


class ObjectStorage:
    """
    Service for bucket operations.

    Constructed once at startup with explicit handles:

        storage = ObjectStorage(
            client=supabase_client,
            http=httpx.AsyncClient(),
            bucket_id=settings.STORAGE_BUCKET_ID,
            storage_url=settings.storage_url,
            service_key=settings.SUPABASE_SERVICE_KEY,
        )
    """

    def __init__(
        self,
        client: Client,
        http: httpx.AsyncClient,
        bucket_id: str | None,
        storage_url: str,
        service_key: str,
        cache_max_age: int = 31536000,
    ):
        self.client = client
        self.http = http
        self.bucket_id = bucket_id
        self.storage_url = storage_url.rstrip("/")
        self.service_key = service_key
        self.cache_max_age = cache_max_age

    @property
    def configured(self) -> bool:
        return bool(self.bucket_id)

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.cache_max_age}"

    def _require_bucket(self) -> str:
        if not self.bucket_id:
            raise StorageNotConfiguredError()
        return self.bucket_id

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def upload(
        self,
        buffer: bytes,
        original_filename: str,
        mime_type: str,
        folder: str = "uploads",
    ) -> UploadResult:
        """
        Store a byte buffer under a fresh key.

        Args:
            buffer: File content
            original_filename: Client-supplied name (only its extension is kept)
            mime_type: Declared content type, stored with the object
            folder: One of FOLDERS

        Returns:
            UploadResult with the serving URL, bucket key and generated filename

        Raises:
            ValueError: If folder is not one of FOLDERS
            StorageNotConfiguredError: If no bucket is configured (no network call made)
            StorageUploadError: If the provider rejects the write
        """
        if folder not in FOLDERS:
            raise ValueError(f"Unknown storage folder: {folder}")

        bucket_id = self._require_bucket()

        filename = generate_filename(original_filename)
        object_name = build_object_name(folder, filename)

        logger.info(f"Starting upload: {object_name} ({len(buffer)} bytes)")

        try:
            self.client.storage.from_(bucket_id).upload(
                path=object_name,
                file=buffer,
                file_options={
                    "content-type": mime_type or DEFAULT_CONTENT_TYPE,
                    "cache-control": str(self.cache_max_age),
                },
            )
        except Exception as e:
            logger.error(f"Storage upload failed for {object_name}: {e}")
            raise StorageUploadError(str(e))

        logger.info(f"Upload successful: {object_name}")

        return UploadResult(
            url=f"{SERVING_PREFIX}/{folder}/{filename}",
            object_path=object_name,
            filename=filename,
        )

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    async def open_stream(self, folder: str, filename: str) -> ObjectStream:
        """
        Open a streaming read of public/<folder>/<filename>.

        Raises:
            StorageNotConfiguredError: If no bucket is configured
            ObjectNotFoundError: If the object doesn't exist, or the path
                names anything outside the public folders
            StorageDownloadError: On any other provider or transport failure
        """
        if not is_servable(folder, filename):
            raise ObjectNotFoundError(f"{folder}/{filename}")

        bucket_id = self._require_bucket()
        object_name = build_object_name(folder, filename)

        request = self.http.build_request(
            "GET",
            f"{self.storage_url}/object/authenticated/{bucket_id}/{object_name}",
            headers={
                "Authorization": f"Bearer {self.service_key}",
                "apikey": self.service_key,
            },
        )

        try:
            response = await self.http.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.error(f"Storage read failed for {object_name}: {e}")
            raise StorageDownloadError(object_name, str(e))

        if response.status_code in MISSING_OBJECT_STATUSES:
            await response.aclose()
            raise ObjectNotFoundError(object_name)

        if response.is_error:
            await response.aclose()
            logger.error(f"Storage read failed for {object_name}: HTTP {response.status_code}")
            raise StorageDownloadError(object_name, f"HTTP {response.status_code}")

        # A re-encoded body no longer matches the upstream length
        content_length = None
        if "content-encoding" not in response.headers:
            content_length = response.headers.get("content-length")

        return ObjectStream(
            content_type=response.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
            content_length=content_length,
            body=response.aiter_bytes(),
            close=response.aclose,
        )

    # -------------------------------------------------------------------------
    # Delete
    # -------------------------------------------------------------------------

    def delete(self, path: str) -> bool:
        """
        Best-effort removal of a stored object.

        Args:
            path: /storage/..., /objects/... or a raw bucket key

        Returns:
            True if the provider accepted the delete. Failures are logged,
            never raised; an unconfigured bucket is a silent no-op.
        """
        if not self.bucket_id:
            return False

        object_name = object_name_for(path)

        try:
            self.client.storage.from_(self.bucket_id).remove([object_name])
        except Exception as e:
            logger.error(f"Failed to delete {object_name}: {e}")
            return False

        logger.info(f"Deleted: {object_name}")
        return True

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    def check_bucket(self) -> str:
        """
        Probe the configured bucket for readiness checks.

        Returns:
            "healthy", "not configured" or "unhealthy: <reason>"
        """
        if not self.bucket_id:
            return "not configured"

        try:
            self.client.storage.get_bucket(self.bucket_id)
        except Exception as e:
            logger.warning(f"Bucket check failed for {self.bucket_id}: {e}")
            return f"unhealthy: {str(e)[:50]}"
        return "healthy"
