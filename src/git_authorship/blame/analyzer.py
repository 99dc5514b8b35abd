"""Drive one attribution run: list, filter, blame, tally."""

from typing import Callable, FrozenSet, Iterable, List, Optional

from ..config import AuthorshipConfig, default_config
from ..exceptions import GitCommandError, OutputDecodingError
from ..logging_config import get_logger
from .filters import matches_extension, normalize_extensions
from .git_client import VersionControl
from .models import AuthorshipReport
from .parser import iter_authors
from .tally import AuthorTally

logger = get_logger(__name__)


class AuthorshipAnalyzer:
    """Blame every tracked file with an allowed extension and tally authors.

    Files are processed one at a time. Any git failure aborts the run unless
    ``config.skip_failed_files`` is set, in which case per-file command and
    decoding failures are logged and the file is left out.
    """

    def __init__(
        self,
        vcs: VersionControl,
        extensions: Iterable[str],
        config: Optional[AuthorshipConfig] = None,
        on_file: Optional[Callable[[str], None]] = None,
    ):
        self.vcs = vcs
        self.extensions: FrozenSet[str] = normalize_extensions(extensions)
        self.config = config or default_config
        self.on_file = on_file

    def select_files(self) -> List[str]:
        tracked = self.vcs.list_tracked_files()
        selected = [p for p in tracked if matches_extension(p, self.extensions)]
        logger.info(
            "%d of %d tracked files match extensions: %s",
            len(selected),
            len(tracked),
            ", ".join(sorted(self.extensions)) or "(none)",
        )
        return selected

    def run(self) -> AuthorshipReport:
        tally = AuthorTally()
        processed: List[str] = []
        skipped: List[str] = []

        for path in self.select_files():
            if self.on_file is not None:
                self.on_file(path)
            try:
                raw = self.vcs.blame(path)
            except (GitCommandError, OutputDecodingError) as e:
                if not self.config.skip_failed_files:
                    raise
                logger.warning("Skipping %s: %s", path, e)
                skipped.append(path)
                continue

            tally.merge_authors(iter_authors(raw))
            processed.append(path)

        if tally.total == 0:
            logger.info("No lines attributed to any author")

        return AuthorshipReport(
            entries=tally.build_report(self.config.sort_mode),
            total_lines=tally.total,
            files_processed=processed,
            files_skipped=skipped,
            sort_mode=self.config.sort_mode,
        )
