"""
Trip profit sharing between agents and the house.

Sign convention: win/loss is from the customer's side, so a customer loss
(negative) is a house gain.

    house gross win    = -total win/loss
    house net win      = gross win - rolling commission
    house final profit = net win - expenses          (the "net result")

Each agent takes their own percentage of the house final profit; the
company keeps whatever percentage is left, which goes negative if the
agents are allotted more than 100%. Nothing is clamped or rejected here;
run validate_trip_financials separately when the numbers need checking.
"""

from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from junket.config import get_settings
from junket.schemas.customer import CustomerNetPosition
from junket.schemas.trip import TripAgent, TripSharing
from junket.utils.numbers import HUNDRED, ZERO, Number, to_decimal

LEGACY_AGENT_ID = "legacy"
LEGACY_AGENT_NAME = "Legacy Agent"

AgentLike = Union[TripAgent, Mapping[str, Any]]


def _as_agent(agent: AgentLike) -> TripAgent:
    if isinstance(agent, TripAgent):
        return agent
    return TripAgent.model_validate(agent)


def _share_of(profit: Decimal, percentage: Decimal) -> Decimal:
    return profit * percentage / HUNDRED


def calculate_trip_sharing(
    total_win_loss: Number,
    total_expenses: Number,
    total_rolling_commission: Number,
    agents: Iterable[AgentLike],
    total_buy_in: Number = 0,
    total_buy_out: Number = 0,
) -> TripSharing:
    """Split a trip's house final profit between its agents and the company.

    Args:
        total_win_loss: Customers' combined win/loss (negative = house won)
        total_expenses: Operating costs charged to the trip
        total_rolling_commission: Commission paid back to customers
        agents: TripAgent records or mappings with a share percentage
        total_buy_in: Cash customers converted into credit
        total_buy_out: Credit customers converted back to cash

    Returns:
        TripSharing with every agent's calculated_share filled in.
        Agent records passed in are copied, not modified.
    """
    win_loss = to_decimal(total_win_loss)
    expenses = to_decimal(total_expenses)
    rolling_commission = to_decimal(total_rolling_commission)
    buy_in = to_decimal(total_buy_in)
    buy_out = to_decimal(total_buy_out)
    trip_agents = [_as_agent(agent) for agent in agents]

    agent_share_percentage = sum(
        (agent.share_percentage for agent in trip_agents), ZERO
    )
    company_share_percentage = HUNDRED - agent_share_percentage

    house_gross_win = -win_loss
    house_net_win = house_gross_win - rolling_commission
    house_final_profit = house_net_win - expenses

    net_cash_flow = buy_out - buy_in

    total_agent_share = _share_of(house_final_profit, agent_share_percentage)
    company_share = _share_of(house_final_profit, company_share_percentage)

    agent_breakdown = [
        agent.model_copy(
            update={
                "calculated_share": _share_of(
                    house_final_profit, agent.share_percentage
                )
            }
        )
        for agent in trip_agents
    ]

    return TripSharing(
        total_win_loss=win_loss,
        total_expenses=expenses,
        total_rolling_commission=rolling_commission,
        total_buy_in=buy_in,
        total_buy_out=buy_out,
        net_cash_flow=net_cash_flow,
        house_gross_win=house_gross_win,
        house_net_win=house_net_win,
        net_result=house_final_profit,
        total_agent_share=total_agent_share,
        company_share=company_share,
        agent_share_percentage=agent_share_percentage,
        company_share_percentage=company_share_percentage,
        agent_breakdown=agent_breakdown,
    )


def calculate_trip_sharing_legacy(
    total_win_loss: Number,
    total_expenses: Number,
    total_rolling_commission: Number,
    agent_share_percentage: Optional[Number] = None,
) -> TripSharing:
    """Single-agent sharing kept for older call sites.

    Builds one synthetic agent holding `agent_share_percentage`
    (settings.legacy_agent_share_percentage, 50 by default) and no
    buy-in/buy-out, then runs calculate_trip_sharing.
    """
    if agent_share_percentage is None:
        agent_share_percentage = get_settings().legacy_agent_share_percentage

    legacy_agent = TripAgent(
        agent_id=LEGACY_AGENT_ID,
        agent_name=LEGACY_AGENT_NAME,
        share_percentage=agent_share_percentage,
    )
    return calculate_trip_sharing(
        total_win_loss,
        total_expenses,
        total_rolling_commission,
        [legacy_agent],
        0,
        0,
    )


def calculate_customer_net_position(
    win_loss: Number,
    buy_in: Number,
    buy_out: Number,
    rolling_commission: Number,
) -> CustomerNetPosition:
    """Customer's combined cash and gaming position.

    Positive cash flow means the customer took out more than they put in.
    """
    net_cash_flow = to_decimal(buy_out) - to_decimal(buy_in)
    net_gaming_result = to_decimal(win_loss) - to_decimal(rolling_commission)

    return CustomerNetPosition(
        net_cash_flow=net_cash_flow,
        net_gaming_result=net_gaming_result,
        total_net_position=net_cash_flow + net_gaming_result,
    )
