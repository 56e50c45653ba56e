"""Blog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from bloglist.api.dependencies import get_blog_service, get_current_user
from bloglist.schemas.auth import CurrentUser
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from bloglist.services.blogs import BlogService

router = APIRouter(prefix="/api/blogs", tags=["blogs"])

# Ids beyond the database integer range can never match a row
BlogId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.get("", response_model=list[BlogResponse])
def get_blogs(service: Annotated[BlogService, Depends(get_blog_service)]):
    """Get all blogs with their owners."""
    return service.list_blogs()


@router.get("/{blog_id}", response_model=BlogResponse)
def get_blog(blog_id: BlogId, service: Annotated[BlogService, Depends(get_blog_service)]):
    """Get a single blog."""
    return service.get_blog(blog_id)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
def create_blog(
    blog_data: BlogCreate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """Create a new blog owned by the current user."""
    return service.create_blog(blog_data, current_user)


@router.put("/{blog_id}", response_model=BlogResponse)
def update_blog(
    blog_id: BlogId,
    blog_data: BlogUpdate,
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """Update a blog (typically its likes)."""
    return service.update_blog(blog_id, blog_data)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(
    blog_id: BlogId,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[BlogService, Depends(get_blog_service)],
):
    """Delete a blog owned by the current user."""
    service.delete_blog(blog_id, current_user)
