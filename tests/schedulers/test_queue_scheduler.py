from deferred.schedulers import QueueScheduler
from deferred.futures import Future
from deferred.config import Default
import unittest


class QueueSchedulerTest(unittest.TestCase):
    def setUp(self):
        self.scheduler = QueueScheduler()
        self.calls = []

    def tearDown(self):
        self.scheduler.shutdown()

    def test_runs_only_when_drained(self):
        self.scheduler(self.calls.append, 1)
        self.assertEqual([], self.calls)
        self.assertEqual(1, self.scheduler.pending())

        self.scheduler.run_ready()
        self.assertEqual([1], self.calls)
        self.assertEqual(0, self.scheduler.pending())

    def test_fifo(self):
        def first():
            self.calls.append(1)
            self.scheduler(self.calls.append, 3)

        self.scheduler(first)
        self.scheduler(self.calls.append, 2)
        self.scheduler.run_ready()
        self.assertEqual([1, 2, 3], self.calls)

    def test_keyword_arguments(self):
        self.scheduler(lambda a, b=None: self.calls.append((a, b)), 1, b=2)
        self.scheduler.run_ready()
        self.assertEqual([(1, 2)], self.calls)

    def test_timers_after_ready_callbacks(self):
        self.scheduler.call_later(0, self.calls.append, 'timer')
        self.scheduler(self.calls.append, 'ready')
        self.scheduler.run()
        self.assertEqual(['ready', 'timer'], self.calls)

    def test_timers_in_deadline_order(self):
        self.scheduler.call_later(0.2, self.calls.append, 'b')
        self.scheduler.call_later(0.1, self.calls.append, 'a')
        self.scheduler.call_later(0.3, self.calls.append, 'd')
        self.scheduler.call_later(0.2, self.calls.append, 'c')
        self.scheduler.run()
        self.assertEqual(['a', 'b', 'c', 'd'], self.calls)
        self.assertAlmostEqual(0.3, self.scheduler.time)

    def test_ready_callbacks_drained_between_timers(self):
        def timer(name):
            self.calls.append(name)
            self.scheduler(self.calls.append, name + ' followup')

        self.scheduler.call_later(0.1, timer, 'a')
        self.scheduler.call_later(0.1, timer, 'b')
        self.scheduler.run()
        self.assertEqual(['a', 'a followup', 'b', 'b followup'], self.calls)

    def test_advance(self):
        self.scheduler.call_later(0.1, self.calls.append, 'a')
        self.scheduler.call_later(0.5, self.calls.append, 'b')

        self.scheduler.advance(0.2)
        self.assertEqual(['a'], self.calls)
        self.assertAlmostEqual(0.2, self.scheduler.time)

        self.scheduler.advance(0.2)
        self.assertEqual(['a'], self.calls)

        self.scheduler.advance(0.2)
        self.assertEqual(['a', 'b'], self.calls)

    def test_timer_relative_to_virtual_time(self):
        self.scheduler.advance(1)
        self.scheduler.call_later(0.5, self.calls.append, 'a')
        self.scheduler.advance(0.4)
        self.assertEqual([], self.calls)
        self.scheduler.advance(0.2)
        self.assertEqual(['a'], self.calls)

    def test_callback_error_reported(self):
        reported = []
        original = Default.__dict__['UNHANDLED_FAILURE_CALLBACK']
        self.addCleanup(setattr, Default, 'UNHANDLED_FAILURE_CALLBACK', original)
        Default.UNHANDLED_FAILURE_CALLBACK = staticmethod(lambda cls, tb: reported.append(cls))

        def error():
            raise TypeError()

        self.scheduler(error)
        self.scheduler(self.calls.append, 'next')
        self.scheduler.run()

        self.assertEqual([TypeError], reported)
        self.assertEqual(['next'], self.calls)

    def test_submit_success(self):
        f = self.scheduler.submit(lambda x: x * 2, 21)
        self.assertIsInstance(f, Future)
        self.scheduler.run()
        self.assertEqual(42, f.result())

    def test_submit_failure(self):
        def error():
            raise TypeError()

        f = self.scheduler.submit(error)
        self.scheduler.run()
        self.assertTrue(f.is_rejected())
        self.assertIsInstance(f.result(), TypeError)

    def test_shutdown_discards_callbacks(self):
        with QueueScheduler() as scheduler:
            scheduler(self.calls.append, 1)
            scheduler.call_later(1, self.calls.append, 2)
        scheduler.run()
        self.assertEqual([], self.calls)


if __name__ == '__main__':
    unittest.main()
