"""
Region lookups backed by the partition metadata shipped with botocore.
"""
import logging
from typing import Dict, List, Optional

from botocore.loaders import create_loader

from productinfo.models.productinfo_schemas import Region

logger = logging.getLogger(__name__)


def load_partitions() -> List[Dict]:
    """Load the static partition table from botocore's bundled endpoints data."""
    return create_loader().load_data("endpoints").get("partitions", [])


class RegionResolver:
    """
    Resolves region ids against one partition of the provider endpoints table.

    The table is read from local data, no network access is involved.
    """

    def __init__(self, partition: str = "aws", partitions: Optional[List[Dict]] = None):
        """
        Args:
            partition: Partition name, e.g. "aws" or "aws-cn"
            partitions: Partition table in botocore endpoints format, loaded
                from botocore when omitted
        """
        self.partition = partition
        self._partitions = partitions

    def _regions(self) -> Dict[str, Dict]:
        partitions = self._partitions if self._partitions is not None else load_partitions()
        for p in partitions:
            if p.get("partition") == self.partition:
                return p.get("regions", {})
        logger.warning(f"Partition {self.partition} not found in endpoints data")
        return {}

    def get_region(self, region_id: str) -> Optional[Region]:
        for rid, meta in self._regions().items():
            if rid == region_id:
                return Region(id=rid, description=meta.get("description") or "")
        return None

    def get_regions(self) -> Dict[str, str]:
        # keyed by region id, mapped to the region id itself
        return {rid: rid for rid in self._regions()}
