"""
Validation rule sets per catalog entity.

Create sets never look at ``id``; update sets additionally require a
positive one. Foreign keys are only checked for presence.
"""

from shared.config.constants import EntityType, RuleSets
from shared.utils.validators import MinValue, PositiveInt, Required, Validator, title_rules


def _titled(entity_type: EntityType, *extra) -> Validator:
    create = [*title_rules(), *extra]
    return Validator(
        entity_type.value,
        {
            RuleSets.CREATE: create,
            RuleSets.UPDATE: [PositiveInt("id"), *create],
        },
    )


product_category_validator = _titled(EntityType.PRODUCT_CATEGORY)

product_sub_category_validator = _titled(
    EntityType.PRODUCT_SUB_CATEGORY,
    PositiveInt("product_category_id"),
)

product_validator = _titled(
    EntityType.PRODUCT,
    PositiveInt("product_sub_category_id"),
)

nutrient_category_validator = _titled(EntityType.NUTRIENT_CATEGORY)

nutrient_validator = _titled(
    EntityType.NUTRIENT,
    MinValue("daily_dose", minimum=0),
    PositiveInt("nutrient_category_id"),
)

treating_type_validator = _titled(EntityType.TREATING_TYPE)

_product_nutrient_rules = [
    PositiveInt("product_id"),
    PositiveInt("nutrient_id"),
    PositiveInt("treating_type_id"),
    Required("quality"),
    MinValue("quality", minimum=0),
]

product_nutrient_validator = Validator(
    EntityType.PRODUCT_NUTRIENT.value,
    {
        RuleSets.CREATE: _product_nutrient_rules,
        RuleSets.UPDATE: [PositiveInt("id"), *_product_nutrient_rules],
    },
)
