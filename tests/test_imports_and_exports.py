import klinecamp


def test_top_level_imports() -> None:
    # 包可正常导入且关键组件已暴露
    assert hasattr(klinecamp, "NarrativeEngine")
    assert hasattr(klinecamp, "SimulationSession")
    assert hasattr(klinecamp.indicators, "annotate")
    assert hasattr(klinecamp.data, "generate_series")
    assert hasattr(klinecamp.indicators, "get_indicators")


def test_indicator_catalog() -> None:
    from klinecamp.indicators import by_category, get_indicator, get_indicators

    assert [i.id for i in get_indicators()] == ["ma", "macd", "kdj", "boll", "rsi"]
    assert get_indicator("MACD").difficulty == 3
    assert {i.id for i in by_category("Oscillator")} == {"kdj", "rsi"}
    try:
        get_indicator("vwap")
    except KeyError:
        pass
    else:
        raise AssertionError("expected KeyError")
