"""
Max Offer Calculator Service
Solves for the highest purchase price that still leaves the desired profit
"""
import logging

from flip_analyzer.models.flip_calculator_models import (
    CalculatorInputs,
    CalculatorResult,
    CostBreakdown,
    ManualArv,
)

logger = logging.getLogger(__name__)


class MaxOfferCalculator:
    """
    Invert the flip cost model for the purchase price.

    The loan covers purchase price plus repairs, so interest, points and
    buy-side closing costs all scale with the unknown price P:

        arv = fixed_costs + P + buy%*P + (interest + points) * (P + repairs)

    Repairs are financed for the full hold period.
    """

    def calculate(self, inputs: CalculatorInputs) -> CalculatorResult:
        """
        Main calculation method
        Solves for max offer, then rebuilds the breakdown from it
        """
        arv = inputs.arv_value
        months = inputs.hold_time_months

        sale_pct = inputs.closing_costs_sale_pct / 100
        agent_pct = inputs.agent_fees_pct / 100
        buy_pct = inputs.closing_costs_buy_pct / 100
        points_pct = inputs.points_pct / 100
        monthly_interest = inputs.loan_interest_rate / 100 / 12

        # Step 1: Costs independent of purchase price
        closing_costs_at_sale = arv * sale_pct
        agent_fees = arv * agent_pct
        holding_costs = inputs.monthly_holding_costs * months
        fixed_costs = (
            closing_costs_at_sale +
            agent_fees +
            inputs.desired_profit +
            holding_costs +
            inputs.repair_costs
        )
        net = arv - fixed_costs

        # Step 2: Interest and points on the repair portion of the loan
        repair_financing_cost = self._financing_rate(monthly_interest, months, points_pct) * inputs.repair_costs

        # Step 3: Solve for purchase price
        denominator = 1 + buy_pct + self._financing_rate(monthly_interest, months, points_pct)
        max_offer = (net - repair_financing_cost) / denominator

        # Step 4: Breakdown using the solved price
        total_loan = max_offer + inputs.repair_costs
        loan_interest = total_loan * monthly_interest * months
        points = total_loan * points_pct
        closing_costs_at_buy = max_offer * buy_pct

        logger.debug("Max offer %.2f for ARV %.2f over %d months", max_offer, arv, months)

        return CalculatorResult(
            max_offer=max_offer,
            breakdown=CostBreakdown(
                arv=arv,
                closing_costs_at_sale=closing_costs_at_sale,
                agent_fees=agent_fees,
                desired_profit=inputs.desired_profit,
                repair_costs=inputs.repair_costs,
                holding_costs=holding_costs,
                loan_interest=loan_interest,
                points=points,
                closing_costs_at_buy=closing_costs_at_buy,
            )
        )

    def _financing_rate(self, monthly_interest: float, months: int, points_pct: float) -> float:
        """Interest over the hold period plus points, as a fraction of principal"""
        return monthly_interest * months + points_pct


def calculate_max_offer(inputs: CalculatorInputs) -> CalculatorResult:
    """
    Convenience function to calculate the max offer
    """
    calculator = MaxOfferCalculator()
    return calculator.calculate(inputs)


# Example usage
if __name__ == "__main__":
    example_input = CalculatorInputs(arv=ManualArv(value=300000))

    result = calculate_max_offer(example_input)
    b = result.breakdown

    print("=" * 80)
    print("MAX OFFER ANALYSIS")
    print("=" * 80)
    print(f"ARV:                   ${b.arv:,.2f}")
    print(f"Closing Costs (Sale):  ${b.closing_costs_at_sale:,.2f}")
    print(f"Agent Fees:            ${b.agent_fees:,.2f}")
    print(f"Desired Profit:        ${b.desired_profit:,.2f}")
    print(f"Repair Costs:          ${b.repair_costs:,.2f}")
    print(f"Holding Costs:         ${b.holding_costs:,.2f}")
    print(f"Loan Interest:         ${b.loan_interest:,.2f}")
    print(f"Points:                ${b.points:,.2f}")
    print(f"Closing Costs (Buy):   ${b.closing_costs_at_buy:,.2f}")
    print(f"\n{'MAX OFFER':-^80}")
    print(f"Max Offer:             ${result.max_offer:,.2f}")
    print("=" * 80)
