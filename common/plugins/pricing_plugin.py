import pytest


# 自定义命令行参数
def pytest_addoption(parser):
    parser.addoption("--env", action="store", default="dev", help="运行环境")


# Hook 1: 注册自定义标记
def pytest_configure(config):
    """配置pytest，注册测试分层标记"""
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "contract: 契约测试（数据结构形状）")
    config.addinivalue_line("markers", "integration: 集成测试")
    config.addinivalue_line("markers", "slow: 慢测试，生产环境跳过")


# Hook 2: 测试收集后的处理
def pytest_collection_modifyitems(config, items):
    """根据环境和标记过滤、排序测试项"""
    env = config.getoption("--env")
    # 生产环境跳过慢测试
    if env == "prod":
        for item in items:
            if item.get_closest_marker("slow"):
                item.add_marker(pytest.mark.skip(reason="生产环境跳过慢测试"))

    # 按标记对测试排序
    def item_priority(item):
        markers = [m.name for m in item.iter_markers()]
        if "unit" in markers:
            return 0
        elif "contract" in markers:
            return 1
        elif "integration" in markers:
            return 2
        return 3

    items.sort(key=item_priority)
