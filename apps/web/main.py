"""FastAPI web application for deptree."""

import logging
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from pydantic import BaseModel

from deptree.detect import DIALECTS
from deptree.errors import DeptreeError
from deptree.extract import extract

logger = logging.getLogger(__name__)

app = FastAPI(
    title="deptree",
    description="Extract dependency trees from .NET manifests",
    version="0.1.0",
)


class TreeRequest(BaseModel):
    """Request model for extracting a dependency tree."""
    content: str
    filename: Optional[str] = None
    dialect: Optional[str] = None
    include_dev: bool = False
    props: dict[str, str] = {}


class TreeResponse(BaseModel):
    """Response model for an extracted dependency tree."""
    dialect: str
    tree: dict
    target_frameworks: list[str]


@app.get("/api/dialects")
async def list_dialects():
    """List the manifest dialects that can be extracted."""
    return {"dialects": list(DIALECTS)}


@app.post("/api/tree", response_model=TreeResponse)
async def build_tree(request: TreeRequest):
    """Extract a dependency tree from manifest text."""
    content = request.content.strip()
    if not content:
        raise HTTPException(status_code=400, detail="No content provided")
    if request.dialect and request.dialect not in DIALECTS:
        raise HTTPException(status_code=400, detail=f"Unknown dialect: {request.dialect}")

    try:
        result = await extract(
            content,
            request.filename,
            dialect=request.dialect,
            include_dev=request.include_dev,
            props=request.props,
        )
    except DeptreeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected failure extracting dependency tree")
        raise HTTPException(status_code=500, detail=f"Error processing manifest: {str(e)}")

    return TreeResponse(**result.to_dict())


@app.post("/api/upload", response_model=TreeResponse)
async def upload_file(
    file: UploadFile = File(...),
    dialect: Optional[str] = Form(None),
    include_dev: bool = Form(False),
):
    """Upload a manifest file and extract its dependency tree."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await file.read()
    try:
        text_content = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be valid UTF-8 text")

    request = TreeRequest(
        content=text_content,
        filename=file.filename,
        dialect=dialect,
        include_dev=include_dev,
    )
    return await build_tree(request)
