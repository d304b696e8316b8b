from fastapi import FastAPI, Form
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from asset_extractor.extractor import extract_assets, extract_assets_streaming
from asset_extractor.sse_utils import SSE_HEADERS

INITIAL_MESSAGE = "Enter a URL to extract website assets"


app = FastAPI(title="Website Asset Extractor")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ExtractRequest(BaseModel):
    url: str | None = None
    render: bool | None = None


class ExtractedButtonModel(BaseModel):
    type: str
    variant: str
    size: str
    text: str
    code: str
    class_name: str | None = None


class ExtractedTemplateModel(BaseModel):
    name: str
    component: str
    code: str


class ExtractedAssetsModel(BaseModel):
    buttons: list[ExtractedButtonModel] = []
    templates: list[ExtractedTemplateModel] = []


class ExtractResponse(BaseModel):
    success: bool
    assets: ExtractedAssetsModel | None = None
    error: str | None = None


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/")
def root():
    return {"initial_message": INITIAL_MESSAGE}


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/extract", response_model=ExtractResponse, response_model_exclude_unset=True)
async def extract_endpoint(request: ExtractRequest):
    """Extract buttons and layout templates from a page. Failures come back as success=false."""
    return await extract_assets(request.url, render=request.render)


@app.post("/extract/form", response_model=ExtractResponse, response_model_exclude_unset=True)
async def extract_form_endpoint(url: str | None = Form(None)):
    """Form-post variant of /extract (field name: url)."""
    return await extract_assets(url)


# ---------------------------------------------------------------------------
# SSE Streaming Endpoints
# ---------------------------------------------------------------------------

@app.post("/extract/stream")
async def extract_stream(request: ExtractRequest):
    """Extract with step-by-step progress via SSE."""

    async def event_stream():
        async for event in extract_assets_streaming(request.url, render=request.render):
            yield event

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
