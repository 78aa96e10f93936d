from src.sp_common.errors import InvalidTimeError


def check_mining_window(now: int, start_time: int, end_time: int) -> None:
    """Deposits are accepted on [start_time, end_time], both ends inclusive."""
    if now < start_time or now > end_time:
        raise InvalidTimeError(now, start_time, end_time)
