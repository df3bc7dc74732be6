import inspect
import typing


CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A named-event registry of synchronous callbacks.

	When ``event_names`` is given, only those events can be listened to or
	emitted, so a misspelt event name fails immediately instead of never firing.
	"""

	def __init__ (self, event_names: typing.Optional[typing.Iterable[str]] = None) -> None:

		"""
		Initialize an empty event registry, optionally restricted to ``event_names``.
		"""

		self._event_names: typing.Optional[typing.FrozenSet[str]] = frozenset(event_names) if event_names is not None else None
		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def _check_event (self, event_name: str) -> None:

		if self._event_names is not None and event_name not in self._event_names:
			raise ValueError(f"Unknown event {event_name!r}. Available: {sorted(self._event_names)}")


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		self._check_event(event_name)
		self._listeners.setdefault(event_name, []).append(callback)

	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if callback not in self._listeners.get(event_name, []):
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def listener_count (self, event_name: str) -> int:

		"""Return how many callbacks are registered for an event."""

		return len(self._listeners.get(event_name, []))


	def emit_sync (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Emit an event and call listeners immediately, in registration order.

		Raises ``ValueError`` if an async listener is registered, since it
		could not be awaited here.
		"""

		self._check_event(event_name)

		# Copy so a listener may unregister itself while being called.
		for callback in list(self._listeners.get(event_name, [])):

			if inspect.iscoroutinefunction(callback):
				raise ValueError(f"Async callback registered for {event_name!r} cannot be called from emit_sync")

			callback(*args, **kwargs)

