"""API routes for comment analysis endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query

from ..config import settings
from ..models import AnalysisRequest, AnalysisSummary, ClassificationResult, ParsedBatch, ParseRequest, WordCloud
from ..services import analysis_service
from ..text import EmptyInputError, demo_text
from ..wordcloud import InvalidCanvasError

logger = logging.getLogger(__name__)

# Create API router
router = APIRouter(prefix=settings.api_prefix, tags=["analysis"])


def _get_analysis_or_404(job_id: str) -> AnalysisSummary:
    summary = analysis_service.get_analysis(job_id)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"Analysis '{job_id}' not found")
    return summary


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "comment-analysis"}


@router.post("/comments/parse", response_model=ParsedBatch)
def parse_comments(request: ParseRequest):
    """
    Split pasted text into unique comments.

    Returns counts of raw, unique and duplicate lines, and warns when more
    than 40% of the lines look like single keywords rather than comments.
    """
    try:
        return analysis_service.parse_text(request.text)

    except EmptyInputError as e:
        logger.error(f"Empty input for parse request: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/comments/demo", response_model=ParsedBatch)
def demo_comments():
    """Parse the built-in demo comment set."""
    return analysis_service.parse_text(demo_text())


@router.post("/analyses", response_model=AnalysisSummary)
def create_analysis(request: AnalysisRequest):
    """
    Run sentiment analysis over a batch of comments.

    Comments can be sent as pasted text (one per line) or as a flat list.
    Duplicates are analyzed once. The returned job id retrieves the analysis
    and its word cloud later.
    """
    try:
        logger.info("Processing analysis request")

        if request.use_demo:
            return analysis_service.analyze_text(demo_text(), model_id=request.model_id)
        if request.text is not None:
            return analysis_service.analyze_text(request.text, model_id=request.model_id)
        return analysis_service.analyze_lines(request.comments, model_id=request.model_id)

    except EmptyInputError as e:
        logger.error(f"Empty input for analysis request: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.error(f"Unexpected error running analysis: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail="Internal server error occurred while processing request",
        )


@router.get("/analyses/{job_id}", response_model=AnalysisSummary)
async def get_analysis(job_id: str):
    """Return a previously completed analysis."""
    return _get_analysis_or_404(job_id)


@router.get("/analyses/{job_id}/results", response_model=list[ClassificationResult])
def get_analysis_results(
    job_id: str,
    search: str | None = Query(
        default=None, description="Case-insensitive match against comments and keywords"
    ),
    sentiment: str | None = Query(
        default=None, description="Keep only 'positive', 'negative' or 'neutral' results ('all' keeps every result)"
    ),
    sort_by: str | None = Query(
        default=None,
        description="Sort by 'confidence' (highest first), 'sentiment' (alphabetical), 'length' (longest first), or None for input order",
    ),
):
    """Filter and sort the per-comment results of an analysis."""
    summary = _get_analysis_or_404(job_id)

    try:
        return analysis_service.filter_results(
            summary, search=search, sentiment=sentiment, sort_by=sort_by
        )

    except ValueError as e:
        logger.error(f"Invalid parameter for {job_id}: {str(e)}")
        raise HTTPException(status_code=400, detail=f"Invalid parameter: {str(e)}")


@router.get("/analyses/{job_id}/wordcloud", response_model=WordCloud)
def get_word_cloud(
    job_id: str,
    width: int = Query(default=settings.wordcloud_width, ge=1, le=4096, description="Canvas width in pixels"),
    height: int = Query(default=settings.wordcloud_height, ge=1, le=4096, description="Canvas height in pixels"),
    max_words: int = Query(
        default=settings.wordcloud_max_words, ge=1, le=500, description="Maximum number of words"
    ),
):
    """
    Lay out the word cloud for an analysis.

    Words come from each comment's keywords plus every comment word longer
    than three characters. The most frequent word is drawn largest and
    closest to the centre; words that do not fit are listed in ``skipped``.
    """
    summary = _get_analysis_or_404(job_id)

    try:
        return analysis_service.build_word_cloud(
            summary, canvas_width=width, canvas_height=height, max_words=max_words
        )

    except InvalidCanvasError as e:
        logger.error(f"Invalid canvas for {job_id}: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
