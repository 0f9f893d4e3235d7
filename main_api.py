import logging
from typing import List

import httpx
from fastapi import FastAPI, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel

from provision_analyzer.exceptions import ArchiveError, ProvisionAnalyzerError
from provision_analyzer.models import Contract, ContractType
from provision_analyzer.pipeline import ProvisionPipeline

# --- FastAPI Application ---
app = FastAPI(
    title="Contract Insurance Provision Analyzer API",
    description="API for extracting and summarizing insurance provisions from zipped contracts.",
    version="1.0.0"
)


# --- Pydantic Models for Request and Response Validation ---
class AnalyzeUrlRequest(BaseModel):
    archive_url: str
    contract_type: ContractType


class AnalyzeResponse(BaseModel):
    contracts: List[Contract]


# --- Initialize Pipeline ---
# Built once at startup; a missing API key leaves it unset and every request fails with 500.
try:
    pipeline = ProvisionPipeline()
except ProvisionAnalyzerError as e:
    logging.error(f"Failed to initialize provision pipeline on startup: {e}")
    pipeline = None


async def _analyze(archive_bytes: bytes, contract_type: ContractType) -> AnalyzeResponse:
    if not pipeline:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Provision pipeline is not initialized. Check server logs."
        )

    try:
        contracts = await pipeline.process_archive(
            archive_bytes,
            contract_type,
            update_status=lambda message: logging.info(message)
        )
    except ArchiveError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logging.error(f"An unexpected error occurred during analysis: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An internal error occurred: {str(e)}"
        )

    return AnalyzeResponse(contracts=contracts)


# --- API Endpoints ---
@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_upload(
    file: UploadFile = File(...),
    contract_type: ContractType = Form(...)
):
    """Analyzes an uploaded .zip archive of contracts."""
    archive_bytes = await file.read()
    return await _analyze(archive_bytes, contract_type)


@app.post("/analyze/url", response_model=AnalyzeResponse)
async def analyze_url(request: AnalyzeUrlRequest):
    """Downloads a .zip archive of contracts from a URL and analyzes it."""
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(request.archive_url, follow_redirects=True, timeout=30.0)
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to download archive from URL: {request.archive_url} ({e})"
        )

    return await _analyze(response.content, request.contract_type)


@app.get("/health")
def health_check():
    """A simple health check endpoint to verify the service is running."""
    return {"status": "ok"}
