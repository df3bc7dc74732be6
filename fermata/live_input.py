"""Bridge a live MIDI input into a practice session.

MIDI arrives on threads the session does not own: mido calls its input
callback from its own thread, and a transport layer may hand over raw bytes
from anywhere. Everything is funnelled through one ``asyncio.Queue`` with
``call_soon_threadsafe`` and consumed by a single task, so the session only ever
sees one event at a time, in arrival order.

Example:
	```python
	live = LiveInput(session, input_device_name="My Keyboard")
	await live.start()
	...
	await live.stop()
	```
"""

import asyncio
import logging
import typing

import mido

import fermata.midi_parser
import fermata.practice_session


logger = logging.getLogger(__name__)


EventCallback = typing.Callable[[fermata.midi_parser.PerformanceEvent], typing.Any]


def select_input_device (
	device_name: str,
	callback: typing.Optional[typing.Callable[[mido.Message], typing.Any]] = None
) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:

	"""Open a MIDI input port by name.

	If the exact name is not found, falls back to the first available input and
	logs a warning (port names often differ slightly between systems).

	Returns:
		A tuple of (device_name, midi_in) or (None, None) when no input can be opened.
	"""

	try:
		inputs = mido.get_input_names()

	except (OSError, ImportError) as e:
		logger.error(f"Failed to list MIDI inputs: {e}")
		return None, None

	logger.info(f"Available MIDI inputs: {inputs}")

	target = device_name

	if target not in inputs:
		logger.warning(f"MIDI input device '{target}' not found.")

		if not inputs:
			return None, None

		target = inputs[0]
		logger.warning(f"Fallback to: {target}")

	try:
		midi_in = mido.open_input(target, callback=callback)

	except OSError as e:
		logger.error(f"Failed to open MIDI input '{target}': {e}")
		return None, None

	logger.info(f"Opened MIDI input: {target}")

	return target, midi_in


class LiveInput:

	"""
	Feeds raw MIDI (from a mido port or :meth:`submit`) to a practice session.

	Parameters:
		session: The session that receives note events.
		input_device_name: A mido input port to open on :meth:`start`, or None
			to rely on :meth:`submit` only.
		on_event: Optional callback for every parsed event (e.g. to show the
			last message received).
	"""

	def __init__ (
		self,
		session: fermata.practice_session.PracticeSession,
		input_device_name: typing.Optional[str] = None,
		on_event: typing.Optional[EventCallback] = None
	) -> None:

		self.session = session
		self.input_device_name = input_device_name
		self.on_event = on_event

		self.midi_in: typing.Optional[typing.Any] = None
		self.running = False
		self.task: typing.Optional[asyncio.Task] = None

		self._queue: typing.Optional[asyncio.Queue] = None
		self._loop: typing.Optional[asyncio.AbstractEventLoop] = None


	def open_port (self, name: str) -> bool:

		"""Open (or switch to) a mido input port. Returns True on success.

		Must be called after :meth:`start`, so that the port callback has a loop
		to hand messages to.
		"""

		self.close()

		device_name, midi_in = select_input_device(name, self._on_midi_input)

		if device_name is None:
			return False

		self.input_device_name = device_name
		self.midi_in = midi_in

		return True


	def close (self) -> None:

		"""Close the input port, if one is open."""

		if self.midi_in is not None:
			self.midi_in.close()
			self.midi_in = None
			logger.info("Closed MIDI input")


	def _on_midi_input (self, message: mido.Message) -> None:

		"""Handle a message from mido's callback thread."""

		self.submit(message.bytes())


	def submit (self, data: typing.Sequence[int]) -> None:

		"""Queue raw MIDI bytes for the session. Safe to call from any thread.

		Bytes submitted while the bridge is not running are dropped.
		"""

		# stop() may clear these from the event loop thread at any moment.
		loop = self._loop
		queue = self._queue

		if queue is None or loop is None:
			logger.debug(f"Dropping MIDI input received while stopped: {list(data)}")
			return

		try:
			loop.call_soon_threadsafe(queue.put_nowait, tuple(data))

		except RuntimeError:
			logger.debug(f"Dropping MIDI input received after the event loop closed: {list(data)}")


	async def start (self) -> None:

		"""Start consuming input in a background task and open the configured port."""

		if self.running:
			return

		self._loop = asyncio.get_running_loop()
		self._queue = asyncio.Queue()
		self.running = True

		if self.input_device_name is not None:
			self.open_port(self.input_device_name)

		self.task = asyncio.create_task(self.run())

		logger.info("Live input started")


	async def run (self) -> None:

		"""Consume queued messages until :meth:`stop` is called.

		Each message is parsed and note events are applied to the session.
		Malformed messages are dropped by the parser.
		"""

		assert self._queue is not None, "LiveInput.start() must be called before run()"

		while self.running:

			data = await self._queue.get()

			try:

				if data is None:
					break

				event = fermata.midi_parser.parse(data)

				if event is None:
					continue

				logger.debug(event.display)

				try:

					if self.on_event is not None:
						self.on_event(event)

					self.session.handle_event(event)

				except Exception:
					logger.exception(f"Error handling MIDI input: {event.display}")

			finally:
				self._queue.task_done()


	async def drain (self) -> None:

		"""Wait until every message submitted so far has been handled."""

		if self._queue is None:
			return

		# Let pending call_soon_threadsafe puts land on the queue first.
		await asyncio.sleep(0)
		await self._queue.join()


	async def stop (self) -> None:

		"""Stop the consumer task and close the input port."""

		if not self.running:
			return

		self.running = False

		if self._queue is not None:
			self._queue.put_nowait(None)

		if self.task is not None:
			await self.task
			self.task = None

		self.close()

		self._queue = None
		self._loop = None

		logger.info("Live input stopped")
