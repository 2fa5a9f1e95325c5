import traceback
import logging

logger = logging.getLogger(__package__)


def log_error_handler(cls, tb):
    logger.error('Future/Task exception was never retrieved:\n%s',
                 ''.join(tb))


class Default(object):
    # Called when a failure was not handled by anyone: exceptions escaping
    # scheduled callbacks and rejected futures that nobody subscribed to
    UNHANDLED_FAILURE_CALLBACK = staticmethod(log_error_handler)

    # Default scheduler for settlement and callbacks of new futures
    CALLBACK_SCHEDULER = None

    @staticmethod
    def get_callback_scheduler():
        if not Default.CALLBACK_SCHEDULER:
            from .schedulers.asyncio_scheduler import AsyncioScheduler

            Default.CALLBACK_SCHEDULER = AsyncioScheduler()
        return Default.CALLBACK_SCHEDULER

    @staticmethod
    def on_unhandled_error(exc):
        tb = traceback.format_exception(exc.__class__, exc,
                                        exc.__traceback__)
        Default.UNHANDLED_FAILURE_CALLBACK(exc.__class__, tb)

    @staticmethod
    def on_unhandled_rejection(reason):
        if isinstance(reason, BaseException):
            Default.on_unhandled_error(reason)
        else:
            Default.UNHANDLED_FAILURE_CALLBACK(
                reason.__class__, ['Future rejected with {!r}\n'.format(reason)])
