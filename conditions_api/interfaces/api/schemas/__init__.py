from .integration import (
    AccessCheckRead,
    CommercialConditionWithRulesRead,
    CommercialConditionsRead,
    CompanyContextRead,
    ConditionRuleRead,
    DiscountRuleRead,
    DiscountRulesRead,
    HealthRead,
    UserExpressionContextRead,
    VisibilityRuleRead,
    VisibilityRulesRead,
)

__all__ = [
    "AccessCheckRead",
    "CommercialConditionWithRulesRead",
    "CommercialConditionsRead",
    "CompanyContextRead",
    "ConditionRuleRead",
    "DiscountRuleRead",
    "DiscountRulesRead",
    "HealthRead",
    "UserExpressionContextRead",
    "VisibilityRuleRead",
    "VisibilityRulesRead",
]
