"""Reconcile two snapshots of a customer table with rowdiff.

This example walks through the main features of the package:
1. Building arrays from pandas DataFrames
2. Lining up columns that appear in a different order
3. Common and different rows under the match, set and direct methods
4. Deciding equality on a subset of columns while keeping full rows
"""

import numpy as np
import pandas as pd

from rowdiff import (
    Method,
    Options,
    array_from_dataframe,
    auto_align,
    common_columns,
    get_common_rows,
    get_different_rows,
    get_logger,
    pretty_format,
)

logger = get_logger(__name__)


def create_snapshots():
    """Create an old and a new snapshot of the same table."""
    rng = np.random.default_rng(42)
    n_rows = 12
    old = pd.DataFrame(
        {
            "customer_id": [f"C{i:03d}" for i in range(n_rows)],
            "city": rng.choice(["Paris", "Lyon", "Nice"], n_rows),
            "tier": rng.choice(["gold", "silver"], n_rows),
            "updated": "2025-01-01",
        }
    )

    new = old.copy()
    new.loc[3, "tier"] = "platinum"
    new.loc[[5, 8], "updated"] = "2025-02-01"
    new = pd.concat([new, old.iloc[[1]]], ignore_index=True)
    new = new.drop(index=10).sample(frac=1, random_state=1)
    # Same columns, another order, plus a column the old snapshot lacks
    new["source"] = "crm"
    new = new[["source", "tier", "customer_id", "updated", "city"]]
    return old, new


def demo_alignment(array1, array2):
    """Show the shared columns first on both sides."""
    logger.info("\n" + "=" * 60)
    logger.info("1. COLUMN ALIGNMENT")
    logger.info("=" * 60)

    shared = common_columns(array1, array2)
    logger.info(f"Shared columns: {[c.string_hash() for c in shared]}")

    aligned1, aligned2 = auto_align(array1, array2)
    logger.info("\nOld snapshot:\n" + pretty_format(aligned1[:4], 2, 12))
    logger.info("New snapshot:\n" + pretty_format(aligned2[:4], 2, 12))


def demo_methods(array1, array2):
    """Compare the snapshots with each method."""
    logger.info("\n" + "=" * 60)
    logger.info("2. PAIRING METHODS")
    logger.info("=" * 60)

    columns = ["customer_id", "city", "tier", "updated"]
    for method in Method:
        options = Options(method=method, use_columns=columns, sort_indices=True)
        common = get_common_rows(array1, array2, options)
        different = get_different_rows(array1, array2, options)
        logger.info(
            f"\n{method.value.upper()}: "
            f"{len(common.indices1) - 1} common / {len(different.indices1) - 1} "
            f"different in old, {len(common.indices2) - 1} common / "
            f"{len(different.indices2) - 1} different in new"
        )


def demo_ignore_columns(array1, array2):
    """Ignore a volatile column when deciding what changed."""
    logger.info("\n" + "=" * 60)
    logger.info("3. IGNORING COLUMNS")
    logger.info("=" * 60)

    options = Options(ignore_columns=["updated", "source"], sort_indices=True)
    result = get_different_rows(array1, array2, options)

    logger.info(f"Changed rows in old snapshot (indices {result.indices1}):")
    logger.info("\n" + pretty_format(result.rows1))
    logger.info(f"Changed rows in new snapshot (indices {result.indices2}):")
    logger.info("\n" + pretty_format(result.rows2))


def main():
    old, new = create_snapshots()
    array1 = array_from_dataframe(old)
    array2 = array_from_dataframe(new)

    demo_alignment(array1, array2)
    demo_methods(array1, array2)
    demo_ignore_columns(array1, array2)


if __name__ == "__main__":
    main()
