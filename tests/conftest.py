import logging

import pytest
from pyspark.sql import SparkSession

# Fixture that needs a local SparkSession
_SPARK_FIXTURE_NAME = "spark_fixture"


def quiet_py4j() -> None:
    """Turn down Spark logging during the test context."""
    logging.getLogger("py4j").setLevel(logging.WARN)


@pytest.fixture(scope="session")
def spark_fixture():
    quiet_py4j()

    spark = (
        SparkSession.Builder()
        .appName("Information Schema Tests")
        # Introspection tables are tiny; one core is plenty.
        .master("local[1]")
        # Fail fast if the local driver cannot start.
        .config("spark.network.timeout", "10000")
        .config("spark.executor.heartbeatInterval", "1000")
        .config("spark.driver.memory", "1g")
        # Default of 200 shuffle partitions only adds overhead here.
        .config("spark.sql.shuffle.partitions", "1")
        .config("spark.default.parallelism", "1")
        .config("spark.ui.showConsoleProgress", "false")
        .config("spark.ui.enabled", "false")
        .config("spark.sql.session.timeZone", "UTC")
        .getOrCreate()
    )

    yield spark

    spark.stop()


def _mark_tests_using_spark_fixture(tests: list[pytest.Item]) -> None:
    """
    Add the `requires_spark` marker to every collected test that uses the Spark fixture.

    :param tests: list of tests collected by `pytest`
    """
    for test in tests:
        if _SPARK_FIXTURE_NAME in getattr(test, "fixturenames", ()):
            test.add_marker(pytest.mark.requires_spark)


def _skip_spark_tests(test: pytest.Item) -> None:
    """
    Skip a test marked `requires_spark`.

    Not invoked when `--include-spark-tests` is given.

    :param test: test collected by `pytest`
    """
    if any(test.iter_markers(name="requires_spark")):
        pytest.skip("Skipped tests that require a SparkSession")


def pytest_addoption(parser: pytest.Parser):
    parser.addoption(
        "--include-spark-tests",
        action="store_true",
        default=False,
        help="Also run tests that start a local SparkSession.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    if not config.getoption("--include-spark-tests"):
        _mark_tests_using_spark_fixture(tests=items)


def pytest_runtest_setup(item: pytest.Item):
    if not item.config.getoption("--include-spark-tests"):
        _skip_spark_tests(test=item)
