"""Resource patch orchestrator.

Coordinates downloading each timezone resource and merging it into the
target ICU data bundle.
"""

import logging
import tempfile
from contextlib import nullcontext
from functools import partial
from pathlib import Path

import httpx

from tzpatch.config import Settings
from tzpatch.domain.errors import FetchError, InvalidTargetError
from tzpatch.domain.models import (
    RESOURCE_MANIFEST,
    DownloadOutcome,
    PatchReport,
    PatchRequest,
    ResourceResult,
)
from tzpatch.domain.services import ResourceLocator
from tzpatch.domain.types import Fetcher, Merger
from tzpatch.operations.download import fetch_resource
from tzpatch.operations.merge import run_merge_tool
from tzpatch.ui import Reporter

logger = logging.getLogger(__name__)


class ResourcePatch:
    """Orchestrates patching an ICU data bundle with updated timezone resources.

    For every resource in the manifest, in order:
    1. Download it into the working directory
    2. Merge it into the target with the merge tool
    3. Delete the downloaded file

    The first failure aborts the run. Resources already merged stay merged;
    there is no rollback of the target file.
    """

    def __init__(
        self,
        config: Settings | None = None,
        fetcher: Fetcher | None = None,
        merger: Merger | None = None,
        client: httpx.Client | None = None,
        resources: tuple[str, ...] = RESOURCE_MANIFEST,
    ):
        """Initialize the resource patch orchestrator.

        Args:
            config: Pipeline configuration. If None, creates new Settings() from environment.
            fetcher: Download function. Defaults to fetch_resource with the configured chunk size.
            merger: Merge function. Defaults to run_merge_tool.
            client: HTTP client to reuse. If None, one is created per run.
            resources: Ordered resource names to merge.
        """
        self.config = config if config is not None else Settings()
        self.fetcher = fetcher or partial(fetch_resource, chunk_size=self.config.chunk_size)
        self.merger = merger or run_merge_tool
        self.client = client
        self.resources = resources

    def run(self, request: PatchRequest, reporter: Reporter | None = None) -> PatchReport:
        """Patch the target bundle with every resource.

        Args:
            request: What to patch and with which versions
            reporter: Optional reporter for progress. Defaults to Reporter().

        Returns:
            Report of the merged resources

        Raises:
            InvalidTargetError: The target file does not exist
            FetchError: A download failed
            PatchError: The merge tool failed
        """
        if reporter is None:
            reporter = Reporter()

        if not request.target_path.is_file():
            raise InvalidTargetError(request.target_path)

        target = request.target_path.resolve()
        base_url = ResourceLocator.base_url(self.config.base_url, request)
        report = PatchReport(target_path=target, base_url=base_url)

        reporter.report_target(request)
        logger.info(f"Patching {target} from {base_url}")

        with self._working_directory() as work_dir, self._http_client() as client:
            for name in self.resources:
                result = self._process_resource(
                    name, base_url + name, target, Path(work_dir), client, report, reporter
                )
                report.resources.append(result)

        return report

    def _process_resource(
        self,
        name: str,
        url: str,
        target: Path,
        work_dir: Path,
        client: httpx.Client,
        report: PatchReport,
        reporter: Reporter,
    ) -> ResourceResult:
        """Download, merge and clean up a single resource."""
        temp_path = work_dir / name

        # Download
        reporter.report_step(f"Downloading {url}")
        try:
            with reporter.download_context():
                hook = reporter.create_download_progress_hook(name)
                outcome = self.fetcher(url, temp_path, client, hook)
        except FetchError as e:
            logger.error(f"Download of {name} failed: {e}")
            reporter.report_download_result(
                DownloadOutcome(url=url, local_path=temp_path, success=False, error_detail=str(e))
            )
            self._discard(temp_path)
            raise
        except BaseException:
            self._discard(temp_path)
            raise
        reporter.report_download_result(outcome)

        # Merge
        reporter.report_step(f"Patching {name}")
        try:
            self.merger(self.config.tool, ["-a", name, str(target)], work_dir)
        except BaseException:
            self._discard(temp_path)
            raise
        reporter.report_done()

        # Cleanup failure is not fatal, the merge already happened
        cleaned_up = True
        try:
            temp_path.unlink()
        except OSError as e:
            cleaned_up = False
            message = f"Could not remove {temp_path}: {e}"
            logger.warning(message)
            report.warnings.append(message)
            reporter.report_warning(message)

        return ResourceResult(
            name=name, url=url, bytes_written=outcome.bytes_written, cleaned_up=cleaned_up
        )

    def _working_directory(self):
        """Return a context manager yielding the directory for downloads."""
        if self.config.work_dir is not None:
            return nullcontext(self.config.work_dir)
        return tempfile.TemporaryDirectory(prefix="tzpatch-")

    def _http_client(self):
        """Return a context manager yielding the HTTP client for the run."""
        if self.client is not None:
            return nullcontext(self.client)
        return httpx.Client(timeout=httpx.Timeout(self.config.http_timeout))

    @staticmethod
    def _discard(path: Path) -> None:
        """Remove a downloaded file after a failed step, ignoring failures."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove {path}: {e}")
