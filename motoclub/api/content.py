"""Event, blog and landing page endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from motoclub.api.dependencies import get_repository
from motoclub.api.schemas import (
    BlogPostListResponse,
    BlogPostSchema,
    ErrorResponse,
    EventListResponse,
    HomeResponse,
    blog_post_to_schema,
    event_to_schema,
    product_to_schema,
)
from motoclub.catalog import build_highlights
from motoclub.content.repository import ContentRepository

router = APIRouter()


@router.get("/home", response_model=HomeResponse, tags=["Home"])
async def get_home(
    repository: Annotated[ContentRepository, Depends(get_repository)],
) -> HomeResponse:
    """Get staff picks, upcoming events and catalog freshness."""
    highlights = build_highlights(
        await repository.list_products(),
        await repository.list_events(),
    )
    return HomeResponse(
        staff_picks=[product_to_schema(p) for p in highlights.staff_picks],
        upcoming_events=[event_to_schema(e) for e in highlights.upcoming_events],
        last_updated=highlights.last_updated,
    )


@router.get("/events", response_model=EventListResponse, tags=["Events"])
async def list_events(
    repository: Annotated[ContentRepository, Depends(get_repository)],
) -> EventListResponse:
    """List events ordered by start date."""
    events = await repository.list_events()
    return EventListResponse(
        items=[event_to_schema(e) for e in events],
        total=len(events),
    )


@router.get("/blog", response_model=BlogPostListResponse, tags=["Blog"])
async def list_blog_posts(
    repository: Annotated[ContentRepository, Depends(get_repository)],
) -> BlogPostListResponse:
    """List blog posts."""
    posts = await repository.list_blog_posts()
    return BlogPostListResponse(
        items=[blog_post_to_schema(p) for p in posts],
        total=len(posts),
    )


@router.get(
    "/blog/{post_id}",
    response_model=BlogPostSchema,
    responses={404: {"model": ErrorResponse}},
    tags=["Blog"],
)
async def get_blog_post(
    post_id: str,
    repository: Annotated[ContentRepository, Depends(get_repository)],
) -> BlogPostSchema:
    """Get a blog post by ID.

    Raises:
        HTTPException: If the post is not found.
    """
    post = await repository.get_blog_post(post_id)

    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error_code": "BLOG_POST_NOT_FOUND",
                "message": f"Blog post not found: {post_id}",
            },
        )

    return blog_post_to_schema(post)
