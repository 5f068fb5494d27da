import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """assertion failures, reported apart from unexpected exceptions."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function keeps working under pytest."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: str = "") -> BaseException:
    """call func and require it to raise error_type. returns the raised error."""
    try:
        result = func()
    except error_type as e:
        return e
    except Exception as e:
        raise SuiteAssertionError(
            f"expected {error_type.__name__}, got {type(e).__name__}: {e} {message}".rstrip())
    raise SuiteAssertionError(
        f"expected {error_type.__name__}, call returned {result!r} {message}".rstrip())


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report, returns true when all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None

        try:
            test_item['func']()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # registered tests are cleared so several suites can run from one script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    failed_count = sum(1 for r in results if not r['passed'])
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {total - failed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{color}---------------{_c.reset}\n")
    return failed_count == 0
