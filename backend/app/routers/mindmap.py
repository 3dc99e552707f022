from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse, Response

from app.models.mindmap_models import (
    MindmapDocument,
    MindmapNode,
    RenderRequest,
    RenderResponse,
)
from app.rate_limit import limiter
from app.services.mindmap_html import generate_mindmap_page, render_mindmap_html
from app.services.mindmap_json import document_to_json
from app.services.mindmap_loader import (
    DEFAULT_FILE_NAME,
    InvalidMindmapPathError,
    MindmapNotFoundError,
    load_mindmap_lines,
    sanitize_file_name,
)
from app.services.outline_parser import count_nodes, parse_outline, split_lines

router = APIRouter(prefix="/api/mindmap", tags=["mindmap"])


def _load_forest(file_path: str) -> tuple[str, list[MindmapNode]]:
    try:
        name = sanitize_file_name(file_path)
        lines = load_mindmap_lines(name)
    except MindmapNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidMindmapPathError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return name, parse_outline(lines)


@router.get("/page", response_class=HTMLResponse)
@limiter.limit("60/minute")
async def mindmap_page(request: Request, file_path: str = DEFAULT_FILE_NAME) -> HTMLResponse:
    _, forest = _load_forest(file_path)
    return HTMLResponse(content=generate_mindmap_page(forest))


@router.get("/tree", response_model=MindmapDocument)
@limiter.limit("60/minute")
async def mindmap_tree(request: Request, file_path: str = DEFAULT_FILE_NAME) -> Response:
    name, forest = _load_forest(file_path)
    # Serialized without pydantic, which refuses trees nested a few hundred levels deep
    return Response(
        content=document_to_json(name, forest, count_nodes(forest)),
        media_type="application/json",
    )


@router.post("/render", response_model=RenderResponse)
@limiter.limit("30/minute")
async def render_text(request: Request, body: RenderRequest) -> RenderResponse:
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="Text input is empty")
    forest = parse_outline(split_lines(body.text))
    return RenderResponse(html=render_mindmap_html(forest), node_count=count_nodes(forest))
