from collections import defaultdict
from typing import Callable, DefaultDict, List, Type
from vidshrink.domain.events import Event

Handler = Callable[[Event], None]

class EventBus:
    """Synchronous pub/sub keyed by event class.

    A handler registered for a base class (e.g. JobEvent) also receives every
    subclass event. Handlers run in the publisher's thread, most specific
    class first, in subscription order within a class.
    """

    def __init__(self):
        self._handlers: DefaultDict[Type[Event], List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: Type[Event], handler: Handler):
        self._handlers[event_type].append(handler)

    def handlers_for(self, event: Event) -> List[Handler]:
        matched: List[Handler] = []
        for cls in type(event).__mro__:
            if cls in self._handlers:
                matched.extend(self._handlers[cls])
            if cls is Event:
                break
        return matched

    def publish(self, event: Event):
        for handler in self.handlers_for(event):
            handler(event)
