from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nicegui import app, ui
import nicegui.run as ng_run

from decider import MissingRequiredItemError, UserInterface, get_scorer, list_scorers, main_session
from decider.steps import ImportanceElicitor, NameListCollector, RatingsMatrixBuilder, ResultSummary
from logging_config import setup_logging
from models import MAX_RANK, MIN_RANK
from settings import Settings

settings = Settings.from_env()
setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger("decider.app")
scorer = get_scorer(settings.scorer)


@dataclass
class AppState:
    exit_status: int = 0


state = AppState()

LABEL_COL_WIDTH = 180
VALUE_COL_WIDTH = 120


def grid_style(columns: int) -> str:
    template = f"grid-template-columns: {LABEL_COL_WIDTH}px repeat({columns}, {VALUE_COL_WIDTH}px);"
    min_width = LABEL_COL_WIDTH + columns * VALUE_COL_WIDTH
    return f"display: grid; {template} align-items: center; gap: 12px; min-width: {min_width}px;"


class NiceGUIInterface(UserInterface):
    """Runs each step in a persistent dialog and waits for it to close.

    A client disconnect closes the open dialog and skips every later one, so
    the session abandons the remaining steps instead of waiting forever.
    """

    def __init__(self, container: ui.element) -> None:
        self.container = container
        self.disconnected = False
        self._dialog: Optional[ui.dialog] = None
        container.client.on_disconnect(self._on_disconnect)

    def _on_disconnect(self) -> None:
        self.disconnected = True
        if self._dialog is not None:
            logger.info("Client disconnected, abandoning the open step")
            self._dialog.submit(None)

    async def _show(self, dialog: ui.dialog) -> None:
        if self.disconnected:
            dialog.delete()
            return
        self._dialog = dialog
        try:
            await dialog
        finally:
            self._dialog = None
        dialog.delete()

    async def show_introduction(self, text: str) -> None:
        title, _, body = text.partition("\n\n")
        with self.container, ui.dialog().props("persistent") as dialog, ui.card():
            ui.label(title).classes("text-lg font-semibold")
            for line in body.splitlines():
                if line.strip():
                    ui.label(line).classes("text-sm")
            ui.button("Start", on_click=lambda: dialog.submit(True))
        await self._show(dialog)

    async def collect_names(self, collector: NameListCollector) -> None:
        with self.container, ui.dialog().props("persistent") as dialog, ui.card().classes("w-[520px]"):
            ui.label(collector.title).classes("text-lg font-semibold")
            with ui.row().classes("items-center w-full"):
                name_input = ui.input(collector.field_label).classes("grow")
                if collector.hint:
                    name_input.tooltip(collector.hint)

                def submit_name() -> None:
                    if collector.add(name_input.value):
                        name_input.set_value("")
                        items_view.refresh()

                name_input.on("keydown.enter", lambda: submit_name())
                ui.button("Add", on_click=submit_name)

            @ui.refreshable
            def items_view() -> None:
                items = collector.items
                if not items:
                    ui.label("No items yet.").classes("text-gray-500")
                    return
                ui.radio(
                    {idx: name for idx, name in enumerate(items)},
                    value=collector.selected,
                    on_change=lambda e: collector.select(e.value),
                )

            items_view()

            def remove_name() -> None:
                collector.remove_selected()
                items_view.refresh()

            def confirm() -> None:
                try:
                    collector.confirm()
                except MissingRequiredItemError as exc:
                    ui.notify(str(exc), type="warning")
                    return
                dialog.submit(True)

            def cancel() -> None:
                collector.abandon()
                dialog.submit(False)

            with ui.row().classes("w-full justify-end"):
                ui.button("Remove", on_click=remove_name).props("outline color=negative")
                ui.button("Cancel", on_click=cancel).props("flat")
                ui.button("OK", on_click=confirm)
        await self._show(dialog)

    async def elicit_importance(self, elicitor: ImportanceElicitor) -> None:
        with self.container, ui.dialog().props("persistent") as dialog, ui.card():
            ui.label(elicitor.title).classes("text-lg font-semibold")
            ui.label(
                f"Treat {elicitor.baseline.name} as the baseline with importance = {elicitor.standard}."
            ).classes("text-gray-500 text-sm")
            ui.label("Adjust other factors relative to that baseline.").classes("text-gray-500 text-sm")
            with ui.element("div").style(grid_style(1)):
                for idx, factor in enumerate(elicitor.factors):
                    ui.label(factor.name)
                    if not elicitor.is_editable(idx):
                        ui.label(str(elicitor.standard)).classes("text-center text-gray-500")
                        continue
                    ui.number(
                        value=elicitor.get(idx),
                        min=MIN_RANK,
                        max=MAX_RANK,
                        step=1,
                        format="%d",
                        precision=0,
                        on_change=lambda e, i=idx: elicitor.set(i, e.value),
                    ).classes("w-full").props('input-class="text-center" dense')

            def confirm() -> None:
                elicitor.confirm()
                dialog.submit(True)

            def cancel() -> None:
                elicitor.abandon()
                dialog.submit(False)

            with ui.row().classes("w-full justify-end"):
                ui.button("Cancel", on_click=cancel).props("flat")
                ui.button("OK", on_click=confirm)
        await self._show(dialog)

    async def rate_alternatives(self, builder: RatingsMatrixBuilder) -> None:
        _, cols = builder.shape
        style = grid_style(cols)
        with self.container, ui.dialog().props("persistent maximized") as dialog, ui.card():
            ui.label("Rate Alternatives per Factor").classes("text-lg font-semibold")
            ui.label(
                f"For each factor, the first alternative is anchored at {builder.standard}."
            ).classes("text-gray-500 text-sm")
            ui.label("Higher values are more desirable.").classes("text-gray-500 text-sm")
            with ui.element("div").classes("w-full overflow-x-auto").style("max-width: 100%;"):
                with ui.column().classes("gap-2"):
                    with ui.element("div").style(style):
                        ui.label("")
                        for name in builder.column_names:
                            ui.label(name).classes("text-center").style("justify-self: center;")
                    for r, row_name in enumerate(builder.row_names):
                        with ui.element("div").style(style):
                            ui.label(row_name).classes("break-words pr-2")
                            for c in range(cols):
                                if not builder.is_editable(r, c):
                                    ui.label(f"{builder.get(r, c):g}").classes("text-center text-gray-500").style(
                                        "justify-self: center;"
                                    )
                                    continue
                                ui.number(
                                    value=builder.get(r, c),
                                    min=MIN_RANK,
                                    max=MAX_RANK,
                                    step=1,
                                    format="%d",
                                    precision=0,
                                    on_change=lambda e, rr=r, cc=c: builder.set(rr, cc, e.value),
                                ).classes("w-full").props('input-class="text-center" dense')

            def confirm() -> None:
                builder.confirm()
                dialog.submit(True)

            def cancel() -> None:
                builder.abandon()
                dialog.submit(False)

            with ui.row().classes("w-full justify-end"):
                ui.button("Cancel", on_click=cancel).props("flat")
                ui.button("OK", on_click=confirm)
        await self._show(dialog)

    async def show_results(self, summary: ResultSummary) -> None:
        with self.container, ui.dialog() as dialog, ui.card():
            ui.html(summary.to_html())
            ui.button("Close", on_click=lambda: dialog.submit(True))
        await self._show(dialog)

    async def show_error(self, title: str, message: str) -> None:
        with self.container, ui.dialog().props("persistent") as dialog, ui.card():
            ui.label(title).classes("text-lg font-semibold text-negative")
            ui.label(message)
            ui.button("OK", on_click=lambda: dialog.submit(True))
        await self._show(dialog)


@ui.page("/")
def index() -> None:
    ui.page_title("Decision Support Aid")

    with ui.column().classes("w-full max-w-6xl mx-auto p-6") as container:
        ui.label("Decision Support Aid").classes("text-3xl font-semibold")
        ui.label(
            f"Ranking with {list_scorers().get(settings.scorer, type(scorer).__name__)}; "
            f"standard value {settings.standard}."
        ).classes("text-gray-500")

        async def start() -> None:
            start_button.disable()
            interface = NiceGUIInterface(container)
            try:
                status = await main_session(interface, scorer, settings.standard)
            finally:
                start_button.enable()
            if interface.disconnected:
                logger.info("Session abandoned by a disconnected client (status %d)", status)
                return
            if status != 0:
                logger.error("Session ended with insufficient input, shutting down (status %d)", status)
                state.exit_status = status
                app.shutdown()

        start_button = ui.button("Start", on_click=start)


ng_run.setup = lambda: None
ui.run(reload=False, host=settings.host, port=settings.port, title="Decision Support Aid")
sys.exit(state.exit_status)
