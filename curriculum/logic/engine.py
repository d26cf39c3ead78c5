"""
Recommendation Engine

Main orchestrator that combines the curriculum scoring components into a
single pipeline. This is the primary entry point for recommending curriculum
standards.
"""

import asyncio
import logging
import time
from typing import List, Optional

from .catalog import CurriculumCatalog, default_catalog
from .contracts import (
    CurriculumStandard,
    UserContext,
    RecommendationResult,
    RecommendationAnalytics,
    ImplementationGuidance,
)
from .scorer import score_standard, score_catalog
from .ranker import filter_by_confidence, rank_results
from .analytics import compute_analytics
from .guidance import reasoning_for, guidance_for
from .constants import AnalysisStatus, MIN_CONFIDENCE_THRESHOLD, DEFAULT_ANALYSIS_DELAY

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Curriculum recommendation engine.

    Pipeline flow:
    1. Scoring - Run every fit rule against every catalog standard
    2. Filtering - Drop results below the confidence threshold
    3. Ranking - Sort by confidence plus priority weight
    4. Analytics - Optional aggregate view over the ranked set

    The most recent ranked set is kept so reasoning and guidance can be
    looked up by standard id. Concurrent runs are independent; whichever
    finishes last becomes the most recent set.
    """

    def __init__(
        self,
        catalog: Optional[CurriculumCatalog] = None,
        min_confidence: int = MIN_CONFIDENCE_THRESHOLD,
        analysis_delay: float = DEFAULT_ANALYSIS_DELAY,
    ):
        """
        Initialize the recommendation engine.

        Args:
            catalog: Standards to score against. Defaults to the bundled catalog.
            min_confidence: Inclusion threshold for results
            analysis_delay: Simulated analysis latency in seconds
        """
        self.catalog = catalog or default_catalog
        self.min_confidence = min_confidence
        self.analysis_delay = analysis_delay
        self.version = "1.0.0"
        self._latest: List[RecommendationResult] = []

    @property
    def latest_results(self) -> List[RecommendationResult]:
        return list(self._latest)

    def score(
        self,
        standard: CurriculumStandard,
        context: UserContext
    ) -> RecommendationResult:
        """Score a single standard. Pure; does not touch the latest set."""
        return score_standard(standard, context)

    def rank(self, context: UserContext) -> List[RecommendationResult]:
        """Synchronous scoring, filtering and ranking without the delay."""
        scored = score_catalog(self.catalog.all_standards(), context)
        return rank_results(filter_by_confidence(scored, self.min_confidence))

    async def recommend(self, context: UserContext) -> List[RecommendationResult]:
        """
        Generate ranked recommendations for a user context.

        The result depends only on the context; the delay only paces the UI.

        Args:
            context: Location, school type, language and optional preferences

        Returns:
            Ranked list of RecommendationResult, best first
        """
        start_time = time.perf_counter()
        logger.info(
            f"🚀 Starting curriculum analysis: location={context.location!r} "
            f"school_type={context.school_type.value} language={context.language.value}"
        )

        if self.analysis_delay > 0:
            await asyncio.sleep(self.analysis_delay)

        results = self.rank(context)
        self._latest = results

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"✅ Curriculum analysis finished: {len(results)} recommendations "
            f"in {processing_time:.2f}ms"
        )
        return results

    async def recommend_from_dict(self, context_data: dict) -> List[RecommendationResult]:
        """
        Generate recommendations from a dictionary context.

        Convenience method for API integration.
        """
        context = UserContext(**context_data)
        return await self.recommend(context)

    def analytics(
        self,
        results: Optional[List[RecommendationResult]] = None
    ) -> RecommendationAnalytics:
        """Analytics over `results`, or over the latest set when omitted."""
        return compute_analytics(self._latest if results is None else results)

    def reasoning_for(self, standard_id: str) -> List[str]:
        return reasoning_for(self._latest, standard_id)

    def implementation_guidance_for(self, standard_id: str) -> ImplementationGuidance:
        return guidance_for(self._latest, standard_id)


class RecommendationSession:
    """
    Consuming workflow around the engine: idle -> analyzing -> ready.

    Every context change re-enters `analyzing`. A run started for an older
    context is cancelled and, should it still complete, its results are
    discarded so the newest context always wins.
    """

    def __init__(self, engine: RecommendationEngine):
        self.engine = engine
        self.status = AnalysisStatus.IDLE
        self.context: Optional[UserContext] = None
        self.recommendations: List[RecommendationResult] = []
        self.analytics: Optional[RecommendationAnalytics] = None
        self.selected_standard: Optional[CurriculumStandard] = None
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    def update_context(self, context: UserContext) -> asyncio.Task:
        """Start a run for `context`. Must be called from a running event loop."""
        self._generation += 1
        self.context = context
        self.status = AnalysisStatus.ANALYZING

        if self._task is not None and not self._task.done():
            logger.info("♻️ Context changed during analysis; cancelling stale run")
            self._task.cancel()

        self._task = asyncio.create_task(self._run(context, self._generation))
        return self._task

    async def _run(self, context: UserContext, generation: int) -> None:
        results = await self.engine.recommend(context)
        if generation != self._generation:
            logger.info("Discarding superseded analysis result")
            return

        self.recommendations = results
        self.analytics = self.engine.analytics(results)

        # Auto-select top recommendation
        if results and self.selected_standard is None:
            self.selected_standard = results[0].standard

        self.status = AnalysisStatus.READY

    async def wait_until_ready(self) -> None:
        """Wait for the most recent run, following any replacements."""
        while self._task is not None:
            task = self._task
            await asyncio.wait({task})
            if task is self._task:
                return

    def select_standard(self, standard: CurriculumStandard) -> None:
        self.selected_standard = standard

    def reasoning_for(self, standard_id: str) -> List[str]:
        return reasoning_for(self.recommendations, standard_id)

    def implementation_guidance_for(self, standard_id: str) -> ImplementationGuidance:
        return guidance_for(self.recommendations, standard_id)


# Convenience function for simple usage
async def get_recommendations(
    context: UserContext,
    catalog: Optional[CurriculumCatalog] = None,
    analysis_delay: float = 0.0
) -> List[RecommendationResult]:
    engine = RecommendationEngine(catalog, analysis_delay=analysis_delay)
    return await engine.recommend(context)
