"""FastAPI web app for fumen-renderer animation generation."""

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from fumen_renderer.animation_pipeline import decode_message
from fumen_renderer.board import BoardPage
from fumen_renderer.fumen import FumenError
from fumen_renderer.output import (
    media_type_for_output_format,
    output_path_for_format,
    resolve_output_provider,
)
from fumen_renderer.render import RenderConfig, RenderError, render_async

load_dotenv()

app = FastAPI(title="Fumen Renderer")
config = RenderConfig.from_env()


class Message(BaseModel):
    content: str


async def render_response(pages: list[BoardPage], options: str, output_format: str) -> Response:
    """Render pages off the event loop and wrap the image in a response."""
    try:
        media_type = media_type_for_output_format(output_format)
        provider = resolve_output_provider(output_path_for_format(output_format))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        encoded = await render_async(pages, options, config, provider)
    except RenderError as e:
        raise HTTPException(status_code=500, detail=f"Failed to render animation: {e}")

    return Response(
        content=encoded,
        media_type=media_type,
        headers={"Content-Disposition": f"inline; filename=fumen.{output_format.lower()}"},
    )


def decode_or_400(text: str) -> tuple[list[BoardPage], str] | None:
    try:
        decoded = decode_message(text)
    except FumenError as e:
        raise HTTPException(status_code=400, detail=f"Invalid fumen data: {e}")
    if decoded is not None and not decoded[0]:
        raise HTTPException(status_code=400, detail="Fumen data contains no pages")
    return decoded


@app.get("/api/render")
async def render_fumen(
    data: str = Query(..., min_length=1, description="Fumen data (v115@...)"),
    options: str = Query("", description="Render options, e.g. speed=2"),
    output_format: str = Query("gif", alias="format", description="Output format: gif or webp"),
):
    """Render fumen data passed as a query parameter."""
    decoded = decode_or_400(data)
    if decoded is None:
        raise HTTPException(status_code=400, detail="No fumen data found")
    pages, trailing_options = decoded
    return await render_response(pages, options or trailing_options, output_format)


@app.post("/api/message")
async def render_message(message: Message):
    """Render the fumen embedded in a chat message; 204 when there is none."""
    decoded = decode_or_400(message.content)
    if decoded is None:
        return Response(status_code=204)
    pages, options = decoded
    return await render_response(pages, options, "gif")
