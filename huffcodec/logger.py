"""
logger.py

Logging module for huffcodec.


"""


from datetime import datetime
from typing import Any, Dict, Optional, Union

class LogLevel:
    INFO = 0
    WARNING = 1
    ERROR = 2
    PROGRESS = 3


class Log:
    def __init__(self, type_name: str, level: int, message: str) -> None:
        self.level = level
        self.type_name = type_name
        self.message = message
        self.date = datetime.now()

    def __str__(self) -> str:
        return f"{self.date} - {self.type_name} - {self.level} - {self.message}"

    def __repr__(self) -> str:
        return self.__str__()


class FrequencyCountLog(Log):
    def __init__(self, symbol: Any, frequency: int) -> None:
        self.symbol = symbol
        self.frequency = frequency
        super().__init__("Frequency_count_log", LogLevel.INFO, f"Symbol: {symbol!r}, Frequency: {frequency}")


class TreeMergeLog(Log):
    def __init__(self, left_frequency: int, right_frequency: int) -> None:
        self.left_frequency = left_frequency
        self.right_frequency = right_frequency
        self.merged_frequency = left_frequency + right_frequency
        super().__init__("Tree_merge_log", LogLevel.INFO,
                         f"Merged {left_frequency} + {right_frequency} = {self.merged_frequency}")


class CodeAssignedLog(Log):
    def __init__(self, symbol: Any, code: str) -> None:
        self.symbol = symbol
        self.code = code
        super().__init__("Code_assigned_log", LogLevel.INFO, f"Symbol: {symbol!r}, Code: {code}")


class CodingLog(Log):
    """Size of one encoded symbol against the fixed-width baseline, in bits."""
    def __init__(self, fixed_width_size: int, encoded_size: int) -> None:
        self.fixed_width_size = fixed_width_size
        self.encoded_size = encoded_size
        super().__init__("Coding_log", LogLevel.INFO, f"Fixed width size: {fixed_width_size}, Encoded size: {encoded_size}")


class ProgressStep(Log):
    """A single step of a long running operation. Counted by the Logger."""
    def __init__(self, type_name: str, message: str, total_steps: Optional[int] = None) -> None:
        self.base_message = message
        self.total_steps = total_steps
        super().__init__(type_name, LogLevel.PROGRESS, message)


class CountingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Counting_progress_step", message, total_steps)


class CodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Coding_progress_step", message, total_steps)


class DecodingProgressStep(ProgressStep):
    def __init__(self, message: str, total_steps: Optional[int] = None) -> None:
        super().__init__("Decoding_progress_step", message, total_steps)


class Logger:
    def __init__(self) -> None:
        self.progress_counts: Dict[type, int] = {}

        self.logs = []

        self.record_info = True
        self.record_warning = True
        self.record_error = True
        self.record_progress = False

        self.display_info = False
        self.display_warning = True
        self.display_error = True
        self.display_progress = True

        self.save_info = True
        self.save_warning = True
        self.save_error = True
        self.save_progress = False

        self.counting_step_interval_count = 10000
        self.coding_step_interval_count = 1000
        self.decoding_step_interval_count = 1000

    def _step_interval(self, log: ProgressStep) -> int:
        if isinstance(log, CountingProgressStep):
            return self.counting_step_interval_count
        if isinstance(log, DecodingProgressStep):
            return self.decoding_step_interval_count
        return self.coding_step_interval_count

    def _log_progress(self, log: ProgressStep) -> None:
        step_type = type(log)
        count = self.progress_counts.get(step_type, 0) + 1
        self.progress_counts[step_type] = count
        if log.total_steps is not None:
            log.message = f"{log.base_message} ({count}/{log.total_steps})"
        else:
            log.message = f"{log.base_message} ({count})"
        if self.record_progress:
            self.logs.append(log)
        if self.display_progress and (count % self._step_interval(log) == 0):
            print(log)

    def log(self, log: Union[Log, str]) -> None:
        if not (isinstance(log, Log) or isinstance(log, str)):
            raise ValueError("Log must be an instance of Log class or a string")
        if isinstance(log, str):
            log = Log("General", LogLevel.INFO, log)

        if log.level == LogLevel.INFO:
            if self.record_info:
                self.logs.append(log)
            if self.display_info:
                print(log)
        elif log.level == LogLevel.WARNING:
            if self.record_warning:
                self.logs.append(log)
            if self.display_warning:
                print(log)
        elif log.level == LogLevel.ERROR:
            if self.record_error:
                self.logs.append(log)
            if self.display_error:
                print(log)
        elif log.level == LogLevel.PROGRESS and isinstance(log, ProgressStep):
            self._log_progress(log)

    def error(self, error: Exception) -> None:
        """Record an exception that is about to be raised."""
        self.log(Log(type(error).__name__, LogLevel.ERROR, str(error)))

    def _should_save(self, log: Log) -> bool:
        if log.level == LogLevel.INFO:
            return self.save_info
        if log.level == LogLevel.WARNING:
            return self.save_warning
        if log.level == LogLevel.ERROR:
            return self.save_error
        return self.save_progress

    def save(self, file_path: str) -> None:
        with open(file_path, 'w') as file:
            for log in self.logs:
                if self._should_save(log):
                    file.write(str(log) + "\n")
