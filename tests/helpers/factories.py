# tests/helpers/factories.py
"""Metadata factories shared across tests."""

from __future__ import annotations

from suitemeta import metadata as md
from suitemeta.metadata import ComparisonRequirement, Metadata, VersionComparisonOperator


def comparison(version: str, symbol: str = ">=") -> ComparisonRequirement:
    """Build a legacy ``operator version`` requirement."""
    return ComparisonRequirement(
        version=version, operator=VersionComparisonOperator.from_symbol(symbol)
    )


def one_of_each_kind() -> list[Metadata]:
    """One value of every metadata variant, grouped by family."""
    return [
        md.Before(),
        md.After(),
        md.BeforeClass(),
        md.AfterClass(),
        md.PreCondition(),
        md.PostCondition(),
        md.BackupGlobals(enabled=True),
        md.BackupStaticProperties(enabled=False),
        md.ExcludeGlobalVariableFromBackup(global_variable_name="settings"),
        md.ExcludeStaticPropertyFromBackup(class_name="shop.Registry", property_name="items"),
        md.Covers(target="shop.Cart::add"),
        md.CoversClass(class_name="shop.Cart"),
        md.CoversDefaultClass(class_name="shop.Cart"),
        md.CoversFunction(function_name="shop.total"),
        md.CoversMethod(class_name="shop.Cart", method_name="add"),
        md.CoversNothing(),
        md.CodeCoverageIgnore(),
        md.Uses(target="shop.Money"),
        md.UsesClass(class_name="shop.Money"),
        md.UsesDefaultClass(class_name="shop.Money"),
        md.UsesFunction(function_name="shop.round_money"),
        md.UsesMethod(class_name="shop.Money", method_name="add"),
        md.Group(group_name="integration"),
        md.TestDox(text="Cart adds items"),
        md.Test(),
        md.Todo(),
        md.DependsOnClass(class_name="shop.InventoryTest"),
        md.DependsOnMethod(class_name="shop.CartTest", method_name="creates_cart"),
        md.RequiresPython(version_requirement=comparison("3.12")),
        md.RequiresFramework(version_requirement=comparison("8.0")),
        md.RequiresPackage(package="pydantic"),
        md.RequiresOperatingSystem(regular_expression="^Linux$"),
        md.RequiresOperatingSystemFamily(operating_system_family="Linux"),
        md.RequiresSetting(setting="PYTHONHASHSEED", value="0"),
        md.RequiresFunction(function_name="os.fork"),
        md.RequiresMethod(class_name="shop.Cart", method_name="checkout"),
        md.RunInSeparateProcess(),
        md.RunClassInSeparateProcess(),
        md.RunTestsInSeparateProcesses(),
        md.PreserveGlobalState(enabled=False),
        md.DataProvider(class_name="shop.CartTest", method_name="items"),
        md.TestWith(data=(1, "book")),
        md.DoesNotPerformAssertions(),
    ]


ALL_KINDS: tuple[str, ...] = tuple(metadata.kind for metadata in one_of_each_kind())
