"""
Example configuration tree for demos and tests.

Builds a small part definition whose values and modules are gated on
different game versions, the way content authors annotate real configs.
"""
from kspver.tree import ConfigNode


def build_example_part(name: str = "exampleTank") -> ConfigNode:
    part = ConfigNode(name="PART")
    part.add_value("name", name)
    part.add_value("mass", "0.5")
    part.add_value("bulkheadProfiles:KSP_VERSION[>≈1.2]", "size1")
    part.add_value("tags:KSP_VERSION[<1.2]", "fuel tank")

    engine = part.add_node("MODULE")
    engine.add_value("name", "ModuleEngines")
    engine.add_value("EngineType:KSP_VERSION[>≈1.8]", "LiquidFuel")

    # Only one of the two variant modules should survive on any version
    part.add_node("MODULE:KSP_VERSION[<1.8]").add_value("name", "ModulePartVariantsLegacy")
    part.add_node("MODULE:KSP_VERSION[>≈1.8]").add_value("name", "ModulePartVariants")

    resource = part.add_node("RESOURCE")
    resource.add_value("name", "LiquidFuel")
    resource.add_value("amount", "90")
    resource.add_value("maxAmount:KSP_VERSION[1.8|1.9]", "90")

    return part
