from attendance_tracker.attendance.factory import WorkingHoursStrategyFactory
from attendance_tracker.attendance.strategies.elapsed_strategy import ElapsedTimeStrategy
from attendance_tracker.attendance.strategies.fallback_strategy import MissingTimesStrategy
from attendance_tracker.attendance.strategies.sunday_strategy import SundayCreditStrategy


def test_factory_sunday_with_allocation_uses_sunday_credit():
    factory = WorkingHoursStrategyFactory()
    strategy = factory.for_entry(in_time="08:00", out_time="17:00", allocated_hours="08:30", is_sunday=True)

    assert isinstance(strategy, SundayCreditStrategy)


def test_factory_missing_out_time_uses_fallback():
    factory = WorkingHoursStrategyFactory()
    strategy = factory.for_entry(in_time="08:00", out_time="", allocated_hours="08:30", is_sunday=False)

    assert isinstance(strategy, MissingTimesStrategy)


def test_factory_weekday_with_times_uses_elapsed():
    factory = WorkingHoursStrategyFactory()
    strategy = factory.for_entry(in_time="08:00", out_time="17:00", allocated_hours=None, is_sunday=False)

    assert isinstance(strategy, ElapsedTimeStrategy)


def test_custom_tolerance_is_applied():
    factory = WorkingHoursStrategyFactory(tolerance_minutes=30)
    strategy = factory.for_entry(in_time="08:00", out_time="16:05", allocated_hours="08:30", is_sunday=False)

    decision = strategy.decide(in_time="08:00", out_time="16:05", allocated_hours="08:30", is_sunday=False)
    assert decision.working_hours == "08:30"
