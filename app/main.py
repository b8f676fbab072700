import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request

from app.config import settings
from app.engine import AnalysisOptions, analyze_sales_data
from app.errors import InvalidInput
from app.models import SalesDataset

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the sample dataset once so the demo endpoints are immediately usable
    from scripts.seed_data import build_sample_dataset
    app.state.sample_dataset = build_sample_dataset(settings.SAMPLE_SEED)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Seller revenue, profit, ranking and bonus reports",
    lifespan=lifespan,
)

_DEFAULT_OPTIONS = AnalysisOptions()


def _run_report(dataset: SalesDataset) -> dict:
    logger.info(
        "Building sales report: %d sellers, %d products, %d purchase records",
        len(dataset.sellers), len(dataset.products), len(dataset.purchase_records),
    )
    try:
        report = analyze_sales_data(dataset, _DEFAULT_OPTIONS)
    except InvalidInput as exc:
        raise HTTPException(400, str(exc))
    return {"sellers": [entry.model_dump() for entry in report]}


@app.get("/health", summary="Liveness check")
def health():
    return {"status": "ok", "version": settings.APP_VERSION}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.post(f"{settings.API_PREFIX}/reports/sales", summary="Build a sales report for a dataset")
def create_sales_report(dataset: SalesDataset):
    return _run_report(dataset)


@app.get(f"{settings.API_PREFIX}/reports/sample", summary="Sales report for the sample dataset")
def get_sample_report(request: Request):
    return _run_report(request.app.state.sample_dataset)


# ── Sample data ──────────────────────────────────────────────────────────────

@app.get(f"{settings.API_PREFIX}/sample-data", summary="The generated sample dataset")
def get_sample_data(request: Request):
    return request.app.state.sample_dataset.model_dump()
