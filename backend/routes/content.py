"""
Content Routes.
Serves the institutional pages (home, about, history, hierarchy, recruitment).
"""

from fastapi import APIRouter, HTTPException, status
from typing import List

from services.content import get_page, list_pages

router = APIRouter(prefix="/content", tags=["Content"])


@router.get("/", response_model=List[str])
async def get_available_pages():
    """List the slugs of every informational page."""
    return list_pages()


@router.get("/{page}")
async def get_page_content(page: str):
    """
    Get the content of one informational page.

    Available pages: `home`, `about`, `history`, `hierarchy`,
    `recruitment`, `stolen-vehicles`.
    """
    content = get_page(page)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Page '{page}' not found"
        )
    return content
