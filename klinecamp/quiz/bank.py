"""Question bank for the quiz mode."""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class QuizQuestion:
    id: int
    question: str
    options: Tuple[str, ...]
    correct_index: int
    explanation: str
    type: str = "text"
    image_url: Optional[str] = None


def _q(qid: int, question: str, options: Tuple[str, ...], correct: int, explanation: str) -> QuizQuestion:
    return QuizQuestion(id=qid, question=question, options=options, correct_index=correct, explanation=explanation)


QUESTION_BANK: Tuple[QuizQuestion, ...] = (
    # K线 & 形态
    _q(1, "在K线图中，当收盘价高于开盘价时，通常显示为红色，这被称为？",
       ("阴线", "阳线", "十字星", "墓碑线"), 1,
       "收盘价高于开盘价表示当日价格上涨，称为阳线（红柱）。"),
    _q(2, "“早晨之星”形态通常出现在下跌趋势的末端，它预示着什么？",
       ("继续下跌", "行情见底反转", "横盘整理", "成交量萎缩"), 1,
       "早晨之星是经典的底部反转形态，价格可能上涨。"),
    _q(3, "K线实体很小，上下影线很长，表示多空双方势均力敌，这种形态叫？",
       ("光头光脚", "大阴线", "十字星", "红三兵"), 2,
       "十字星意味着开盘价和收盘价几乎相同，常是变盘信号。"),
    _q(4, "高位出现一根长上影线的K线，状如墓碑，这通常被称为？",
       ("射击之星/流星", "锤头线", "倒锤头", "早晨之星"), 0,
       "射击之星出现在高位，长上影线表明多头进攻受阻，是见顶信号。"),
    _q(5, "连续三根阳线，收盘价依次创新高，这种形态被称为？",
       ("三只乌鸦", "红三兵", "多方炮", "上升三法"), 1,
       "红三兵是强烈的看涨信号，表明多头力量持续增强。"),
    _q(6, "下跌趋势中出现一根大阴线，次日低开高走收出切入阴线实体一半以上的阳线，这是？",
       ("乌云盖顶", "曙光初现", "身怀六甲", "平底"), 1,
       "曙光初现是底部反转形态，阳线深入阴线实体越深，反转信号越强。"),
    _q(7, "上涨趋势中，大阳线后紧接着一根实体覆盖阳线实体的大阴线，这是？",
       ("穿头破脚/吞没形态", "孕线", "吊颈线", "刺透形态"), 0,
       "看跌吞没是顶部强烈的反转信号。"),
    # 指标 & 量价
    _q(8, "MACD指标中，快线（DIF）向上穿越慢线（DEA）形成的交叉被称为？",
       ("死叉", "背离", "金叉", "盘整"), 2,
       "快线从下向上突破慢线被称为金叉，通常视为买入信号。"),
    _q(9, "价格创新高但成交量在减少（量价背离），通常预示着？",
       ("上涨动力十足", "趋势可能反转", "主力在吸筹", "无特殊意义"), 1,
       "量价背离意味着上涨缺乏资金支持，是见顶的常见信号。"),
    _q(10, "布林带开口急剧变大，通常意味着？",
       ("市场进入震荡", "波动率加剧，变盘在即", "成交量萎缩", "主力出货"), 1,
       "开口扩大表示价格波动加剧，通常伴随单边趋势的开始。"),
    # 缠论
    _q(11, "在缠论中，构成'笔'的最基本条件是？",
       ("至少3根K线", "顶分型+底分型+中间至少一根独立K线", "成交量放大", "均线金叉"), 1,
       "一笔必须由顶分型和底分型构成，且之间至少有一根独立K线。"),
    _q(12, "缠论中，判断走势结束的依据通常是？",
       ("MACD死叉", "背驰（背离）", "跌破均线", "巨量长阴"), 1,
       "缠论的核心在于背驰：没有背驰，就没有买卖点。"),
    _q(13, "缠论中的'中枢'是由什么构成的？",
       ("连续三根K线重叠", "连续三笔的重叠部分", "均线的缠绕", "成交量的堆积"), 1,
       "中枢由连续三笔的重叠区间构成，是判断走势级别的基础。"),
    _q(14, "缠论中，'第三类买点'通常出现在哪里？",
       ("中枢下方背驰处", "中枢内部震荡时", "突破中枢并回踩不进入中枢时", "跌破中枢最低点时"), 2,
       "次级别离开中枢后回试不回到中枢内部，即第三类买点。"),
    _q(15, "缠论中，K线包含关系处理的目的是什么？",
       ("简化K线，方便画笔", "过滤杂波", "计算成交量", "寻找支撑位"), 0,
       "包含处理使K线成为标准元素，从而准确定义分型。"),
    _q(16, "缠论中，顶分型的最高点被称为？",
       ("高点", "顶", "极值", "上沿"), 1,
       "顶分型中间K线的高点是该分型的'顶'，是画笔的重要锚点。"),
    # 综合 / 心理
    _q(17, "交易中常说的 '止损' 是为了？",
       ("锁定利润", "截断亏损，保护本金", "预测市场", "增加交易频率"), 1,
       "止损的核心是生存。截断亏损，让利润奔跑。"),
    _q(18, "T+1交易制度指的是？",
       ("当天买入当天可以卖出", "当天买入第二天才能卖出", "买入后锁定1小时", "资金实时到账"), 1,
       "当日买入的股票，下一个交易日才能卖出。"),
    _q(19, "移动平均线（MA）主要用于判断？",
       ("短期波动", "价格趋势", "具体买卖点", "成交量变化"), 1,
       "移动平均线平滑了价格噪音，主要用于识别趋势方向。"),
    _q(20, "当RSI指标超过80时，通常被认为市场处于什么状态？",
       ("超卖", "超买", "平衡", "低迷"), 1,
       "RSI超过80通常被视为超买区，价格可能回调。"),
)


def draw_questions(count: int = 3, rng: Optional[random.Random] = None) -> List[QuizQuestion]:
    """Sample ``count`` distinct questions; ``count`` is capped at the bank size."""
    if count < 0:
        raise ValueError("count must be non-negative")
    rng = rng or random.Random()
    return rng.sample(QUESTION_BANK, min(count, len(QUESTION_BANK)))
