"""Fixed narrative catalog: the opening, the random event pool and the endings."""

import random
from typing import Dict, Tuple

from .models import PlayerStats, StatDelta, StoryChoice, StoryEvent

BANKRUPTCY = "BANKRUPTCY"
HOSPITAL = "HOSPITAL"
RETIREMENT = "RETIREMENT"


def _news_all_in(s: PlayerStats, rng: random.Random) -> StatDelta:
    if rng.random() > 0.6:
        return StatDelta.set_cash(s.cash * 1.5, reputation=5, health=-5)
    return StatDelta.set_cash(s.cash * 0.6, health=-10)


def _news_probe(s: PlayerStats, rng: random.Random) -> StatDelta:
    if rng.random() > 0.5:
        return StatDelta.add_cash(5000, insight=2)
    return StatDelta.add_cash(-2000, insight=1)


ENDING_EVENTS: Dict[str, StoryEvent] = {
    BANKRUPTCY: StoryEvent(
        id=BANKRUPTCY,
        text="你的账户余额已不足以支付网费。证券公司强平了你的仓位。你破产了。",
        is_ending=True,
        choices=(StoryChoice(text="黯然离场", log_text="游戏结束：破产。"),),
    ),
    HOSPITAL: StoryEvent(
        id=HOSPITAL,
        text="长期的熬夜复盘和巨大的精神压力击垮了你。你在看盘时突然晕倒，醒来时已在ICU。医生勒令你远离股市。",
        is_ending=True,
        choices=(StoryChoice(text="保命要紧", log_text="游戏结束：健康崩溃。"),),
    ),
    RETIREMENT: StoryEvent(
        id=RETIREMENT,
        text="三年期满。你看着账户里的数字，回顾这跌宕起伏的交易生涯。你是市场的幸存者。",
        is_ending=True,
        choices=(StoryChoice(text="查看最终身价", log_text="游戏通关。"),),
    ),
}

RANDOM_EVENTS: Tuple[StoryEvent, ...] = (
    StoryEvent(
        id="evt_news_leak",
        text="深夜，你在一个隐秘的群里看到关于某龙头股的小道消息。尚未证实，但传得有鼻子有眼。",
        choices=(
            StoryChoice(
                text="全仓杀入 (高风险)",
                req_cash=10_000,
                effect=_news_all_in,
                log_text="你决定赌一把消息票...",
            ),
            StoryChoice(
                text="轻仓试错",
                req_cash=5_000,
                effect=_news_probe,
                log_text="你小心翼翼地买了一点。",
            ),
            StoryChoice(
                text="无视噪音，专注K线",
                effect=lambda s, rng: StatDelta(insight=3, health=2),
                log_text="你关掉了聊天软件，继续研究均线系统。",
            ),
        ),
    ),
    StoryEvent(
        id="evt_market_crash",
        text="大盘遭遇黑色星期四，千股跌停。恐慌情绪在蔓延，你的持仓正在快速缩水。",
        choices=(
            StoryChoice(
                text="割肉止损，现金为王",
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 0.85, health=-5),
                log_text="你忍痛砍掉了仓位，保住了大部分本金。",
            ),
            StoryChoice(
                text="躺平装死",
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 0.7, health=-2),
                log_text="你关掉账户，祈祷明天会反弹。结果并没有。",
            ),
            StoryChoice(
                text="逆势抄底 (需高认知)",
                req_insight=30,
                req_cash=20_000,
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 1.3, reputation=10),
                log_text="凭借对情绪周期的理解，你在恐慌盘涌出时果断接货，吃到了地天板。",
            ),
        ),
    ),
    StoryEvent(
        id="evt_study",
        text="周末到了。朋友约你去喝酒，但你刚买了一本《缠论》还没拆封。",
        choices=(
            StoryChoice(
                text="去喝酒放松",
                cost=1_000,
                effect=lambda s, rng: StatDelta(health=10, reputation=2),
                log_text="你选择了社交和放松，心态得到了恢复。",
            ),
            StoryChoice(
                text="闭关修炼",
                effect=lambda s, rng: StatDelta(insight=8, health=-3),
                log_text="你苦读了一整天，感觉对笔和线段的理解加深了。",
            ),
        ),
    ),
    StoryEvent(
        id="evt_guru",
        text="你在论坛上发表的复盘文章火了，一家私募的操盘手私信你，想和你交流。",
        choices=(
            StoryChoice(
                text="虚心请教",
                effect=lambda s, rng: StatDelta(insight=5, reputation=5),
                log_text="大佬点拨了你几句，你受益匪浅。",
            ),
            StoryChoice(
                text="借机募资 (需高声望)",
                req_reputation=30,
                effect=lambda s, rng: StatDelta.add_cash(100_000, reputation=10),
                log_text="凭借你的名气，大佬决定给你一笔资金操作！",
            ),
        ),
    ),
    StoryEvent(
        id="evt_bull_market",
        text="一波主升浪行情来了！周围连卖菜大妈都在谈论股票。",
        choices=(
            StoryChoice(
                text="加杠杆猛干",
                req_cash=10_000,
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 1.8, health=-15),
                log_text="虽然心惊胆战，但满仓融资让你赚得盆满钵满。",
            ),
            StoryChoice(
                text="稳健持股",
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 1.2, health=2),
                log_text="你享受着资产的稳步增值。",
            ),
            StoryChoice(
                text="分批止盈",
                effect=lambda s, rng: StatDelta.set_cash(s.cash * 1.1, insight=2),
                log_text="你并不贪婪，把利润落袋为安。",
            ),
        ),
    ),
)

START_EVENT = StoryEvent(
    id="START",
    text=(
        "你辞去了枯燥的工作，带着仅有的积蓄，租下了一间廉价的公寓。"
        "看着面前闪烁的显示器，你的职业交易员生涯开始了。这是第1个月。"
    ),
    choices=(
        StoryChoice(
            text="先买几本经典教材学习",
            cost=500,
            # The book money is the cost; the effect only adds insight.
            effect=lambda s, rng: StatDelta(insight=10),
            log_text="磨刀不误砍柴工，你决定先充实大脑。",
        ),
        StoryChoice(
            text="直接实盘，在战争中学习",
            effect=lambda s, rng: StatDelta.set_cash(s.cash * 0.95, insight=5, health=-5),
            log_text="市场给了你一个下马威，交了点学费，但你学到了经验。",
        ),
    ),
)
