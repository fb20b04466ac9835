import pytest

PLUGIN = "common.plugins.pricing_plugin"


@pytest.fixture
def layered_tests(pytester):
    pytester.makepyfile(
        test_layers="""
        import pytest

        def test_plain():
            pass

        @pytest.mark.integration
        def test_integration():
            pass

        @pytest.mark.slow
        @pytest.mark.contract
        def test_contract():
            pass

        @pytest.mark.unit
        def test_unit():
            pass
        """
    )
    return pytester


@pytest.mark.unit
def test_items_sorted_by_layer(layered_tests):
    result = layered_tests.runpytest("-p", PLUGIN, "-v", "--strict-markers")
    result.assert_outcomes(passed=4)
    # 按 unit -> contract -> integration -> 其他 的顺序执行
    result.stdout.fnmatch_lines([
        "*test_unit PASSED*",
        "*test_contract PASSED*",
        "*test_integration PASSED*",
        "*test_plain PASSED*",
    ])


@pytest.mark.unit
def test_prod_env_skips_slow(layered_tests):
    result = layered_tests.runpytest("-p", PLUGIN, "--env=prod", "-rs")
    result.assert_outcomes(passed=3, skipped=1)
    result.stdout.fnmatch_lines(["*生产环境跳过慢测试*"])
