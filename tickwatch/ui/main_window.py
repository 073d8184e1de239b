"""Main window: a countdown card above a stopwatch card.

Layout (top → bottom):
    - Countdown card: time, length spin box, Start/Pause/Resume/Stop/Restart
    - Stopwatch card: time, Start/Pause/Lap/Split/Stop/Reset, laps, splits
"""

from __future__ import annotations

from datetime import timedelta

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QFrame, QSpinBox,
)

from ..timer import CountdownState, StopwatchState
from ..viewmodel import TimerViewModel
from .styles import build_stylesheet


def _lines(title: str, texts: tuple[str, ...]) -> str:
    if not texts:
        return f"{title}:"
    numbered = (f"{i:>2}.  {t}" for i, t in enumerate(texts, start=1))
    return f"{title}:\n" + "\n".join(numbered)


class TimerWindow(QMainWindow):
    """Binds buttons and labels to a ``TimerViewModel``."""

    def __init__(
        self, view_model: TimerViewModel, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = view_model
        settings = view_model.settings

        self.setWindowTitle("Tickwatch")
        self.resize(settings.window_width, settings.window_height)
        if settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)
        self.setStyleSheet(build_stylesheet())

        central = QWidget(self)
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(16, 12, 16, 12)
        root.setSpacing(12)

        root.addWidget(self._build_countdown_card(central))
        root.addWidget(self._build_stopwatch_card(central), stretch=1)

        self._connect_signals()

    # ── build ─────────────────────────────────────────────────────────────

    def _build_countdown_card(self, parent: QWidget) -> QFrame:
        card = QFrame(parent)
        card.setObjectName("card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 16, 20, 16)

        title = QLabel("COUNTDOWN", card)
        title.setObjectName("cardTitle")
        layout.addWidget(title)

        self.countdown_label = QLabel("00:00", card)
        self.countdown_label.setObjectName("timeLabel")
        self.countdown_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.countdown_label)

        length_row = QHBoxLayout()
        length_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.seconds_spin = QSpinBox(card)
        self.seconds_spin.setRange(1, 99 * 60)
        self.seconds_spin.setSuffix(" s")
        self.seconds_spin.setValue(self._vm.settings.countdown_seconds)
        length_row.addWidget(self.seconds_spin)
        layout.addLayout(length_row)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)
        self.countdown_start_btn = QPushButton("Start", card)
        self.countdown_start_btn.setObjectName("primaryButton")
        self.countdown_pause_btn = QPushButton("Pause", card)
        self.countdown_resume_btn = QPushButton("Resume", card)
        self.countdown_stop_btn = QPushButton("Stop", card)
        self.countdown_stop_btn.setObjectName("dangerButton")
        self.countdown_restart_btn = QPushButton("Restart", card)
        for btn in (
            self.countdown_start_btn, self.countdown_pause_btn,
            self.countdown_resume_btn, self.countdown_stop_btn,
            self.countdown_restart_btn,
        ):
            btn_row.addWidget(btn)
        layout.addLayout(btn_row)
        return card

    def _build_stopwatch_card(self, parent: QWidget) -> QFrame:
        card = QFrame(parent)
        card.setObjectName("card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(20, 16, 20, 16)

        title = QLabel("STOPWATCH", card)
        title.setObjectName("cardTitle")
        layout.addWidget(title)

        self.stopwatch_label = QLabel("00:00.000", card)
        self.stopwatch_label.setObjectName("timeLabel")
        self.stopwatch_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.stopwatch_label)

        grid = QGridLayout()
        grid.setSpacing(8)
        self.stopwatch_start_btn = QPushButton("Start", card)
        self.stopwatch_start_btn.setObjectName("primaryButton")
        self.stopwatch_pause_btn = QPushButton("Pause", card)
        self.stopwatch_lap_btn = QPushButton("Lap", card)
        self.stopwatch_split_btn = QPushButton("Split", card)
        self.stopwatch_stop_btn = QPushButton("Stop", card)
        self.stopwatch_stop_btn.setObjectName("dangerButton")
        self.stopwatch_reset_btn = QPushButton("Reset", card)
        grid.addWidget(self.stopwatch_start_btn, 0, 0)
        grid.addWidget(self.stopwatch_pause_btn, 0, 1)
        grid.addWidget(self.stopwatch_lap_btn, 0, 2)
        grid.addWidget(self.stopwatch_split_btn, 1, 0)
        grid.addWidget(self.stopwatch_stop_btn, 1, 1)
        grid.addWidget(self.stopwatch_reset_btn, 1, 2)
        layout.addLayout(grid)

        lists = QHBoxLayout()
        self.laps_label = QLabel(card)
        self.laps_label.setObjectName("listLabel")
        self.laps_label.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.splits_label = QLabel(card)
        self.splits_label.setObjectName("listLabel")
        self.splits_label.setAlignment(Qt.AlignmentFlag.AlignTop)
        lists.addWidget(self.laps_label)
        lists.addWidget(self.splits_label)
        layout.addLayout(lists, stretch=1)
        return card

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        vm = self._vm

        self.countdown_start_btn.clicked.connect(self._on_start_countdown)
        self.countdown_pause_btn.clicked.connect(vm.pause_countdown)
        self.countdown_resume_btn.clicked.connect(vm.resume_countdown)
        self.countdown_stop_btn.clicked.connect(vm.stop_countdown)
        self.countdown_restart_btn.clicked.connect(vm.restart_countdown)

        self.stopwatch_start_btn.clicked.connect(vm.start_stopwatch)
        self.stopwatch_pause_btn.clicked.connect(vm.pause_stopwatch)
        self.stopwatch_lap_btn.clicked.connect(vm.lap_stopwatch)
        self.stopwatch_split_btn.clicked.connect(vm.record_split_time)
        self.stopwatch_stop_btn.clicked.connect(vm.stop_stopwatch)
        self.stopwatch_reset_btn.clicked.connect(vm.reset_stopwatch)

        vm.countdown_text.observe(self.countdown_label.setText)
        vm.stopwatch_text.observe(self.stopwatch_label.setText)
        vm.lap_texts.observe(
            lambda texts: self.laps_label.setText(_lines("Lap Times", texts))
        )
        vm.split_texts.observe(
            lambda texts: self.splits_label.setText(_lines("Split Times", texts))
        )

        vm.is_countdown_running.observe(self._update_countdown_buttons)
        vm.countdown.remaining_time.changed.connect(self._update_countdown_buttons)
        vm.is_stopwatch_running.observe(self._update_stopwatch_buttons)
        vm.stopwatch.elapsed_time.changed.connect(self._update_stopwatch_buttons)

        # Stopping from FINISHED / a zero-length pause changes no channel.
        self.countdown_stop_btn.clicked.connect(self._update_countdown_buttons)
        self.stopwatch_stop_btn.clicked.connect(self._update_stopwatch_buttons)
        self.stopwatch_reset_btn.clicked.connect(self._update_stopwatch_buttons)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_countdown(self) -> None:
        self._vm.start_countdown(timedelta(seconds=self.seconds_spin.value()))

    def _update_countdown_buttons(self, *_args: object) -> None:
        state = self._vm.countdown.state
        running = state == CountdownState.RUNNING
        self.countdown_pause_btn.setEnabled(running)
        self.countdown_resume_btn.setEnabled(state == CountdownState.PAUSED)
        self.countdown_stop_btn.setEnabled(state != CountdownState.IDLE)
        self.countdown_restart_btn.setEnabled(state != CountdownState.IDLE)
        self.seconds_spin.setEnabled(not running)

    def _update_stopwatch_buttons(self, *_args: object) -> None:
        state = self._vm.stopwatch.state
        running = state == StopwatchState.RUNNING
        self.stopwatch_start_btn.setText(
            "Resume" if state == StopwatchState.PAUSED else "Start"
        )
        self.stopwatch_start_btn.setEnabled(not running)
        self.stopwatch_pause_btn.setEnabled(running)
        self.stopwatch_lap_btn.setEnabled(running)
        self.stopwatch_split_btn.setEnabled(running)
        self.stopwatch_stop_btn.setEnabled(state != StopwatchState.IDLE)
        self.stopwatch_reset_btn.setEnabled(state != StopwatchState.IDLE)

    # ── lifecycle ─────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self._vm.close()
        super().closeEvent(event)
