"""Chat session that runs at most one query at a time."""

from ragchat.config import SettingsStore
from ragchat.rag import RAGPipeline
from ragchat.workers import QueryWorker


class ChatSession:
    """Caller-side guard around the stateless pipeline.

    A new submission is ignored while a previous one is still running. The
    settings snapshot is taken when a query is submitted, so changing the
    settings mid-query does not affect it.
    """

    def __init__(self, source, settings_store=None, pipeline=None, worker_factory=QueryWorker):
        self.source = source
        self.settings_store = settings_store or SettingsStore.default()
        self.pipeline = pipeline or RAGPipeline()
        self.worker_factory = worker_factory
        self.worker = None
        self.is_processing = False

    def submit(self, query, on_answer=None, on_no_matches=None, on_error=None, on_progress=None):
        """Start answering ``query`` in the background.

        Returns:
            True if a worker was started, False if the query was empty or
            another query is still in flight.
        """
        if self.is_processing:
            return False
        query = (query or "").strip()
        if not query:
            return False

        config = self.settings_store.load()
        self.is_processing = True
        worker = self.worker_factory(self.pipeline, query, self.source, config)
        if on_answer:
            worker.answer_ready.connect(on_answer)
        if on_no_matches:
            worker.no_matches.connect(on_no_matches)
        if on_error:
            worker.error_occurred.connect(on_error)
        if on_progress:
            worker.progress_update.connect(on_progress)
        worker.finished.connect(self._on_finished)
        self.worker = worker
        worker.start()
        return True

    def _on_finished(self):
        self.is_processing = False
        self.worker = None
