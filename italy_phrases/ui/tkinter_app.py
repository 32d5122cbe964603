"""Tkinter desktop UI for the phrase list."""
from __future__ import annotations

import os
import tkinter as tk
from dataclasses import dataclass
from tkinter import ttk
from typing import TYPE_CHECKING, Any, Callable

from ..config import AppConfig
from ..domain.defaults import DIRECTIONS_SECTION_TITLE
from ..domain.phrase import Phrase
from .common import (
    APP_TITLE,
    COLLAPSE_LABEL,
    DRAG_HANDLE,
    SPEAKER_ICON,
    drop_index,
    edit_button_label,
    phrase_row_text,
    section_header_text,
)
from .desktop_types import DesktopApp

if TYPE_CHECKING:
    from ..application.phrase_list_controller import PhraseListController


@dataclass
class PhraseRowWidgets:
    frame: ttk.Frame
    handle: ttk.Label
    title: ttk.Label
    caption: ttk.Label
    speak_button: ttk.Button


class TkinterDesktopApp(DesktopApp):
    """Tkinter implementation of the phrase list screen."""

    def __init__(
        self,
        *,
        config: AppConfig,
        controller: "PhraseListController",
        logger,
    ) -> None:
        self.title = APP_TITLE
        self.config = config
        self.controller = controller
        self.logger = logger

        self.root: tk.Tk | None = None
        self.edit_button: ttk.Button | None = None
        self.section_toggle_button: ttk.Button | None = None
        self.section_content: ttk.Frame | None = None
        self.rows_frame: ttk.Frame | None = None
        self.collapse_button: ttk.Button | None = None
        self.rows: list[PhraseRowWidgets] = []
        self.accordion_setters: dict[str, Callable[[bool], None]] = {}
        self.drag_source_index: int | None = None

        self.ui_bg = "#f2f2f7"
        self.ui_card_bg = "#ffffff"
        self.ui_header_bg = "#f7f7fa"
        self.ui_text = "#1c1c1e"
        self.ui_muted = "#6e6e73"
        self.ui_accent = "#0a84ff"
        self.ui_drag_bg = "#e5f0ff"

    def launch(self) -> None:
        self._ensure_root()
        assert self.root is not None
        self.root.mainloop()

    def build_for_test(self) -> tk.Tk:
        """Build root/widgets without entering mainloop (for tests)."""
        self._ensure_root()
        assert self.root is not None
        return self.root

    def _ensure_root(self) -> None:
        if self.root is not None:
            return
        root = tk.Tk()
        self._configure_high_dpi(root)
        root.title(APP_TITLE)
        root.geometry("420x720")
        root.minsize(340, 480)
        root.report_callback_exception = self._report_callback_exception
        self.root = root
        self._configure_theme()
        self._build_layout()
        self.controller.add_listener(self._on_phrases_changed)
        self.controller.initialize()
        root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.logger.debug("Tkinter UI wiring complete")

    def _configure_high_dpi(self, root: tk.Tk) -> None:
        if os.name != "nt":
            return
        try:
            import ctypes

            try:
                ctypes.windll.shcore.SetProcessDpiAwareness(1)
            except Exception:
                ctypes.windll.user32.SetProcessDPIAware()
        except Exception:
            self.logger.debug("High DPI awareness is unavailable")
            return
        pixels_per_inch = float(root.winfo_fpixels("1i"))
        root.tk.call("tk", "scaling", max(1.0, min(2.5, pixels_per_inch / 72.0)))

    def _configure_theme(self) -> None:
        assert self.root is not None
        style = ttk.Style(self.root)
        available = set(style.theme_names())
        for theme_name in ("clam", "alt", "default"):
            if theme_name in available:
                style.theme_use(theme_name)
                break

        self.root.configure(background=self.ui_bg)
        style.configure(".", background=self.ui_bg, foreground=self.ui_text, font=("Segoe UI", 11))
        style.configure("AppBg.TFrame", background=self.ui_bg)
        style.configure("Title.TLabel", background=self.ui_bg, foreground=self.ui_text, font=("Segoe UI", 24, "bold"))
        style.configure("Card.TFrame", background=self.ui_card_bg)
        style.configure("Row.TFrame", background=self.ui_card_bg)
        style.configure("Dragging.TFrame", background=self.ui_drag_bg)
        style.configure("RowTitle.TLabel", background=self.ui_card_bg, foreground=self.ui_text, font=("Segoe UI", 11))
        style.configure("RowCaption.TLabel", background=self.ui_card_bg, foreground=self.ui_muted, font=("Segoe UI", 9))
        style.configure("Handle.TLabel", background=self.ui_card_bg, foreground=self.ui_muted, font=("Segoe UI", 14))
        style.configure("AccordionHeader.TFrame", background=self.ui_header_bg)
        style.configure(
            "Accordion.TButton",
            anchor="w",
            padding=(10, 8),
            font=("Segoe UI", 12, "bold"),
            background=self.ui_header_bg,
            foreground=self.ui_text,
            borderwidth=0,
        )
        style.configure(
            "Link.TButton",
            background=self.ui_card_bg,
            foreground=self.ui_accent,
            borderwidth=0,
            padding=(8, 6),
        )
        style.map("Link.TButton", background=[("active", self.ui_bg)])
        style.configure(
            "Speaker.TButton",
            background=self.ui_card_bg,
            foreground=self.ui_accent,
            borderwidth=0,
            font=("Segoe UI Emoji", 14),
            padding=(6, 2),
        )

    def _build_layout(self) -> None:
        assert self.root is not None
        outer = ttk.Frame(self.root, padding=12, style="AppBg.TFrame")
        outer.pack(fill="both", expand=True)

        toolbar = ttk.Frame(outer, style="AppBg.TFrame")
        toolbar.pack(fill="x", pady=(0, 8))
        self.edit_button = ttk.Button(
            toolbar,
            text=edit_button_label(self.controller.is_editing),
            style="Link.TButton",
            command=self._on_edit_toggle,
        )
        self.edit_button.pack(side="right")
        ttk.Label(outer, text=APP_TITLE, style="Title.TLabel").pack(anchor="w", pady=(0, 12))

        content = self._create_accordion_section(
            outer,
            title=DIRECTIONS_SECTION_TITLE,
            expanded=self.controller.is_expanded,
            key="directions",
        )
        self.section_content = content
        self.rows_frame = ttk.Frame(content, style="Card.TFrame")
        self.rows_frame.pack(fill="x")
        self.collapse_button = ttk.Button(
            content,
            text=COLLAPSE_LABEL,
            style="Link.TButton",
            command=self._on_collapse,
        )
        self.collapse_button.pack(fill="x", pady=(6, 8))

    def _create_accordion_section(
        self,
        parent: ttk.Frame,
        *,
        title: str,
        expanded: bool,
        key: str | None = None,
    ) -> ttk.Frame:
        section = ttk.Frame(parent, style="Card.TFrame")
        section.pack(fill="x")
        header = ttk.Frame(section, style="AccordionHeader.TFrame")
        header.pack(fill="x")
        content = ttk.Frame(section, style="Card.TFrame")
        expanded_state = [bool(expanded)]

        def _apply_state() -> None:
            toggle_btn.configure(text=section_header_text(title, expanded_state[0]))
            managed = content.winfo_manager() != ""
            if expanded_state[0] and not managed:
                content.pack(fill="x", padx=10, pady=(0, 4))
            elif not expanded_state[0] and managed:
                content.pack_forget()

        def _set_expanded(value: bool) -> None:
            expanded_state[0] = bool(value)
            self.controller.set_expanded(expanded_state[0])
            _apply_state()

        def _toggle() -> None:
            _set_expanded(not expanded_state[0])

        toggle_btn = ttk.Button(header, style="Accordion.TButton", command=_toggle)
        toggle_btn.pack(fill="x")
        if key:
            self.accordion_setters[key] = _set_expanded
        if key == "directions":
            self.section_toggle_button = toggle_btn
        _apply_state()
        return content

    def _set_accordion_expanded(self, key: str, expanded: bool) -> None:
        setter = self.accordion_setters.get(str(key))
        if setter is None:
            return
        setter(bool(expanded))

    def _render_rows(self, phrases: list[Phrase]) -> None:
        if self.rows_frame is None:
            return
        for child in self.rows_frame.winfo_children():
            child.destroy()
        self.rows = []
        editing = self.controller.is_editing
        for index, phrase in enumerate(phrases):
            self.rows.append(self._build_row(index, phrase, editing=editing))

    def _build_row(self, index: int, phrase: Phrase, *, editing: bool) -> PhraseRowWidgets:
        assert self.rows_frame is not None
        row = ttk.Frame(self.rows_frame, style="Row.TFrame", padding=(4, 4))
        row.pack(fill="x")
        handle = ttk.Label(row, text=DRAG_HANDLE if editing else "", style="Handle.TLabel", width=2)
        handle.pack(side="left", padx=(0, 6))
        text_box = ttk.Frame(row, style="Row.TFrame")
        text_box.pack(side="left", fill="x", expand=True)
        title_text, caption_text = phrase_row_text(phrase)
        title = ttk.Label(text_box, text=title_text, style="RowTitle.TLabel")
        title.pack(anchor="w")
        caption = ttk.Label(text_box, text=caption_text, style="RowCaption.TLabel")
        caption.pack(anchor="w")
        speak_button = ttk.Button(
            row,
            text=SPEAKER_ICON,
            style="Speaker.TButton",
            command=lambda row_index=index: self._on_speak(row_index),
        )
        speak_button.pack(side="right", anchor="n")
        if editing:
            for widget in (row, handle, text_box, title, caption):
                widget.bind("<ButtonPress-1>", lambda _event, row_index=index: self._on_drag_start(row_index))
                widget.bind("<B1-Motion>", self._on_drag_motion)
                widget.bind("<ButtonRelease-1>", self._on_drag_release)
        return PhraseRowWidgets(
            frame=row,
            handle=handle,
            title=title,
            caption=caption,
            speak_button=speak_button,
        )

    def _row_spans(self) -> list[tuple[float, float]]:
        spans: list[tuple[float, float]] = []
        for row in self.rows:
            top = float(row.frame.winfo_rooty())
            spans.append((top, top + float(row.frame.winfo_height())))
        return spans

    def _on_phrases_changed(self, phrases: list[Phrase]) -> None:
        self._render_rows(phrases)

    def _on_edit_toggle(self) -> None:
        editing = self.controller.toggle_editing()
        if self.edit_button is not None:
            self.edit_button.configure(text=edit_button_label(editing))
        self.drag_source_index = None
        self._render_rows(self.controller.phrases)

    def _on_collapse(self) -> None:
        self._set_accordion_expanded("directions", False)

    def _on_speak(self, index: int) -> None:
        self.controller.speak_phrase(index)

    def _on_drag_start(self, index: int) -> None:
        if not self.controller.is_editing:
            return
        self.drag_source_index = index
        self.rows[index].frame.configure(style="Dragging.TFrame")

    def _on_drag_motion(self, event: tk.Event[Any]) -> None:
        if self.drag_source_index is None:
            return
        target = drop_index(float(event.y_root), self._row_spans())
        for index, row in enumerate(self.rows):
            highlighted = index in (self.drag_source_index, target)
            row.frame.configure(style="Dragging.TFrame" if highlighted else "Row.TFrame")

    def _on_drag_release(self, event: tk.Event[Any]) -> None:
        source = self.drag_source_index
        self.drag_source_index = None
        if source is None:
            return
        target = drop_index(float(event.y_root), self._row_spans())
        self.reorder_rows({source}, target)

    def reorder_rows(self, from_indices: set[int], to_index: int) -> None:
        """Apply a drag result; an unchanged position only clears highlights."""
        if from_indices == {to_index}:
            self._render_rows(self.controller.phrases)
            return
        self.controller.move(from_indices, to_index)

    def _report_callback_exception(self, exc_type, exc_value, exc_traceback) -> None:
        self.logger.error(
            "Tkinter callback failed",
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    def _on_close(self) -> None:
        if self.root is not None:
            self.root.destroy()
            self.root = None


def create_tkinter_app(
    *,
    config: AppConfig,
    controller: "PhraseListController",
    logger,
) -> DesktopApp:
    """Create the Tkinter desktop app instance."""
    return TkinterDesktopApp(config=config, controller=controller, logger=logger)
