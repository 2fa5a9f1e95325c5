from .scheduler_base import SchedulerBase
from .queue_scheduler import QueueScheduler
from .asyncio_scheduler import AsyncioScheduler
