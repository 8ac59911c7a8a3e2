"""Main RAG pipeline orchestrating search, ranking and completion."""

from typing import Callable, Iterable, Optional

from ragchat.config import RagConfig
from ragchat.llm import LLMProvider, OllamaProvider
from .context import ContextAssembler
from .models import Document, QueryResult
from .ranking import rank_candidates
from .search import KeywordFilter

GENERATING_MESSAGE = "generating response..."


class RAGPipeline:
    """Answers a query from a set of notes.

    Stages run strictly in order: keyword filter, query embedding, snippet
    embeddings, ranking, context assembly, completion. Nothing is cached
    between runs and any stage error aborts the query, so one pipeline can
    serve several callers.
    """

    def __init__(self, provider: Optional[LLMProvider] = None, keyword_filter: Optional[KeywordFilter] = None):
        """Initialize the pipeline.

        Args:
            provider: Service provider; when None an OllamaProvider is built
                from the config passed to each query
            keyword_filter: Lexical filter, defaults to KeywordFilter()
        """
        self.provider = provider
        self.keyword_filter = keyword_filter or KeywordFilter()

    def _provider_for(self, config: RagConfig) -> LLMProvider:
        if self.provider is not None:
            return self.provider
        return OllamaProvider.from_config(config)

    def answer(self, query: str, documents: Iterable[Document], config: RagConfig,
               progress: Optional[Callable[[str], None]] = None, debug: bool = False) -> QueryResult:
        """Run the full pipeline for one query.

        Args:
            query: Free-text question
            documents: Notes to search; read lazily while filtering
            config: Settings snapshot for this run
            progress: Optional callback receiving short status messages
            debug: Print stage details

        Returns:
            QueryResult; status "no_matches" when no note mentions a keyword,
            in which case no service is called.

        Raises:
            RAGError: Any service, decoding or ranking failure.
        """
        keywords = self.keyword_filter.extract_keywords(query)
        if not keywords:
            return QueryResult.no_matches(keywords)

        candidates = self.keyword_filter.filter_documents(keywords, documents)
        if not candidates:
            return QueryResult.no_matches(keywords)

        print(f"[RAG] {len(candidates)} candidate notes for keywords {keywords}")
        if progress:
            progress(GENERATING_MESSAGE)

        provider = self._provider_for(config)
        query_embedding = provider.embed_query(query, model=config.embedding_model)
        snippet_embeddings = provider.embed_batch(
            [c.snippet for c in candidates], model=config.embedding_model
        )

        ranked = rank_candidates(query_embedding, list(zip(candidates, snippet_embeddings)))
        if debug:
            for r in ranked:
                print(f"[RAG]   {r.similarity:.4f} {r.doc_id}")

        assembler = ContextAssembler(token_budget=config.token_budget)
        context, _ = assembler.assemble_with_stats(ranked, debug=debug)

        answer = provider.complete(context, query, model=config.completion_model)
        return QueryResult(
            status="answered",
            answer=answer.strip(),
            context=context,
            keywords=keywords,
            ranked=ranked,
        )
