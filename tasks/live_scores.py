"""Scheduled task that polls live matches and posts a score update."""

import itertools
import logging
from typing import Protocol

from core.live_scores.composer import MessageComposer
from core.live_scores.extractor import extract_match
from core.live_scores.models import (
    CycleOutcome,
    CycleState,
    MatchBatch,
    NotificationMessage,
)

logger = logging.getLogger(__name__)


class MatchDataSource(Protocol):
    async def fetch_summary(self) -> MatchBatch | None: ...


class NotificationSink(Protocol):
    async def send(self, message: str, score: str) -> None: ...


class UpdateCycle:
    """Fetch -> extract -> compose -> dispatch, once per scheduler tick.

    Only the first match of a batch is dispatched: its line is appended to
    the cycle's buffer, the buffer is logged, and the line is sent with the
    match's score, ending the cycle. Exactly one notification goes out per
    cycle with matches, none when the batch is empty or the fetch fails.

    Cycles may overlap when a tick fires while a previous one is still
    waiting on the network. Pass skip_if_running=True to skip such ticks.

    Nothing raised by the source or the sink escapes run().
    """

    def __init__(
        self,
        source: MatchDataSource,
        sink: NotificationSink,
        skip_if_running: bool = False,
    ):
        self.source = source
        self.sink = sink
        self.skip_if_running = skip_if_running
        self._states: dict[int, CycleState] = {}
        self._cycle_ids = itertools.count(1)

    @property
    def states(self) -> dict[int, CycleState]:
        """State of every running cycle, keyed by cycle id."""
        return dict(self._states)

    @property
    def in_flight(self) -> int:
        """Number of cycles currently running."""
        return len(self._states)

    def state_of(self, cycle_id: int) -> CycleState:
        """State of one cycle; IDLE once it has finished or never started."""
        return self._states.get(cycle_id, CycleState.IDLE)

    async def run(self) -> CycleOutcome:
        """Run one update cycle.

        Returns:
            How the cycle ended.
        """
        cycle_id = next(self._cycle_ids)

        if self.skip_if_running and self._states:
            logger.warning(
                f"Cycle {cycle_id} skipped, previous cycle still running",
                extra={"cycle_id": cycle_id, "outcome": "skipped"},
            )
            return CycleOutcome.SKIPPED

        try:
            outcome = await self._run_cycle(cycle_id)
        finally:
            self._states.pop(cycle_id, None)

        logger.info(
            f"Cycle {cycle_id} finished: {outcome.value}",
            extra={"cycle_id": cycle_id, "outcome": outcome.value},
        )
        return outcome

    async def _run_cycle(self, cycle_id: int) -> CycleOutcome:
        self._states[cycle_id] = CycleState.FETCHING
        try:
            matches = await self.source.fetch_summary()
        except Exception as e:
            logger.error(
                f"Error while fetching live matches: {e}",
                exc_info=True,
                extra={"cycle_id": cycle_id},
            )
            return CycleOutcome.FETCH_FAILED

        if not matches:
            logger.warning("No matches found.", extra={"cycle_id": cycle_id})
            return CycleOutcome.NO_MATCHES

        logger.info(
            f"Processing {len(matches)} matches",
            extra={"cycle_id": cycle_id, "match_count": len(matches)},
        )
        self._states[cycle_id] = CycleState.PROCESSING
        composer = MessageComposer()

        for record in matches:
            match = extract_match(record)
            line = composer.append(match)
            logger.info(f"Message to be sent to Telex: {composer.text}")
            # Single dispatch point: the first match ends the cycle
            return await self._dispatch(
                NotificationMessage(message=line, score=match.score),
                cycle_id,
            )

        return CycleOutcome.NO_MATCHES

    async def _dispatch(
        self, notification: NotificationMessage, cycle_id: int
    ) -> CycleOutcome:
        self._states[cycle_id] = CycleState.DISPATCHING
        try:
            await self.sink.send(notification.message, notification.score)
        except Exception as e:
            logger.error(
                f"Error while sending to Telex: {e}",
                exc_info=True,
                extra={"cycle_id": cycle_id},
            )
            return CycleOutcome.SEND_FAILED

        logger.info(
            "Live scores sent to Telex successfully.",
            extra={"cycle_id": cycle_id},
        )
        return CycleOutcome.SENT
