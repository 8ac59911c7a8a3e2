"""Worker thread for answering one RAG query."""

import traceback

from PySide6.QtCore import QThread, Signal

from ragchat.errors import RAGError


class QueryWorker(QThread):
    """Runs the RAG pipeline off the UI thread."""

    answer_ready = Signal(str)
    no_matches = Signal(str)
    error_occurred = Signal(str)
    progress_update = Signal(str)  # Emit human-readable progress updates

    def __init__(self, pipeline, query, source, config):
        super().__init__()
        self.pipeline = pipeline
        self.query = query
        self.source = source
        self.config = config
        self.result = None

    def run(self):
        try:
            self.result = self.pipeline.answer(
                self.query,
                self.source.documents(),
                self.config,
                progress=self.progress_update.emit,
            )
        except (RAGError, OSError) as e:
            print(f"[RAG] Query failed: {e}")
            self.error_occurred.emit(f"Error: {e}")
            return
        except Exception as e:
            print("[RAG] Unexpected exception in QueryWorker.run():")
            traceback.print_exc()
            self.error_occurred.emit(f"Error: {e}")
            return

        if self.result.has_answer:
            self.answer_ready.emit(self.result.answer)
        else:
            self.no_matches.emit(self.result.answer)
