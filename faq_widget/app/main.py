import logging
from typing import Annotated

from fastapi import Body, FastAPI, HTTPException, Depends, status
from fastapi.responses import HTMLResponse, Response

from .content_api import router as content_router
from .dependencies import get_widget_service
from .schemas import CreateWidgetResponse, WidgetRead
from ..config import settings
from ..navigation.exceptions import InvalidSelection
from ..schemas.events import WidgetEventType
from ..services.exceptions import WidgetNotFoundError
from ..services.sessions import WidgetSessionService
from ..services.widget import WidgetShell

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="FAQ Widget Host")
app.include_router(content_router)


def _read(widget_id: str, shell: WidgetShell) -> WidgetRead:
    # Map the shell (Service) -> WidgetRead (API)
    return WidgetRead(
        widget_id=widget_id,
        is_open=shell.is_open,
        is_loading=shell.is_loading,
        is_loaded=shell.navigation.is_loaded,
        tree=shell.render(),
        debug=shell.navigation.state.model_dump(mode="json"),
    )

# --- Endpoints ---

@app.post(
    "/widgets",
    response_model=CreateWidgetResponse,
    status_code=status.HTTP_201_CREATED
)
async def create_widget(
    service: WidgetSessionService = Depends(get_widget_service)
):
    """Mounts a new closed widget."""
    widget_id = await service.create_widget()
    return CreateWidgetResponse(widget_id=widget_id)


@app.get("/widgets/{widget_id}", response_model=WidgetRead)
def get_widget(
    widget_id: str,
    service: WidgetSessionService = Depends(get_widget_service)
):
    """Returns the current render tree of a widget."""
    try:
        shell = service.get_widget(widget_id)
    except WidgetNotFoundError:
        raise HTTPException(status_code=404, detail="Widget not found")
    return _read(widget_id, shell)


@app.get("/widgets/{widget_id}/html", response_class=HTMLResponse)
def get_widget_html(
    widget_id: str,
    service: WidgetSessionService = Depends(get_widget_service)
):
    """Returns the widget rendered as an embeddable HTML fragment."""
    try:
        shell = service.get_widget(widget_id)
    except WidgetNotFoundError:
        raise HTTPException(status_code=404, detail="Widget not found")
    return HTMLResponse(shell.render_html())


@app.post("/widgets/{widget_id}/events", response_model=WidgetRead)
async def handle_event(
    widget_id: str,
    event: Annotated[WidgetEventType, Body(discriminator="kind")],
    wait_for_content: bool = False,
    service: WidgetSessionService = Depends(get_widget_service)
):
    try:
        shell = await service.handle_event(widget_id, event, wait_for_content)
    except WidgetNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidSelection as e:
        # Only reachable with STRICT_SELECTION enabled
        raise HTTPException(status_code=422, detail=str(e))
    return _read(widget_id, shell)


@app.delete("/widgets/{widget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_widget(
    widget_id: str,
    service: WidgetSessionService = Depends(get_widget_service)
):
    """
    Deletes a widget. Returns 204 No Content on success.
    """
    success = service.delete_widget(widget_id)
    if not success:
        raise HTTPException(status_code=404, detail="Widget not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)
