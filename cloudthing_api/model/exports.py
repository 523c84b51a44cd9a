# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import Any, List, Tuple

from deprecated import deprecated

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import CloudThingObject, UpdatableObject, UpdatableResource, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class Export(UpdatableObject):
    """Represent an export, i.e. a grant of access to an application's
    model (devices of a product, or a group/cluster) for another tenant.

    The export entries are a list of dictionaries like
    :: python
        {'type': 'data', 'name': 'temp', 'read': True, 'write': False,
         'grantRead': False, 'grantWrite': False}
    """
    _parser = ResourceParser({
        'model_type': 'modelType',
        'limits_type': 'limitsType',
        'export': 'export',
        'tenant_exporting_permission': 'tenantExportingPermission'
    }, [
        Relation('limits', link_only=True),
        Relation('product', service='products'),
        Relation('tenant_exp', 'tenantExp', service='tenant'),
        Relation('tenant_imp', 'tenantImp', service='tenant'),
        Relation('application', service='applications'),
        Relation('tenant_exporting_permission_export', 'tenantExportingPermissionExport', service='exports'),
    ])
    _create_fields = ('model_type', 'limits_type', 'export', 'tenant_exporting_permission')
    _create_links = ('limits', 'product', 'tenant_imp', 'application', 'tenant_exporting_permission_export')
    _update_fields = _create_fields
    _update_links = _create_links

    DEVICE_MODEL = 'DEVICE'

    # limits type -> name of the service resolving the limits link
    _LIMITS_SERVICES = {
        'DEVICE': 'devices',
        'GROUP': 'groups',
        'CLUSTER': 'clusters',
    }

    def __init__(self, service: Exports = None, model_type: str = None, limits_type: str = None,
                 export: List[dict] = None, tenant_exporting_permission: str = None):
        """Create a new Export object.

        Args:
            service (Exports):  Service reference; needs to be set for
                direct manipulation (save, delete)
            model_type (str):  Type of the exported model, e.g. DEVICE
            limits_type (str):  Type of the object limiting the export,
                one of DEVICE, GROUP or CLUSTER
            export (list):  Export entries
            tenant_exporting_permission (str):  Permission of the
                exporting tenant
        """
        super().__init__(service=service)
        self.model_type = model_type
        self.limits_type = limits_type
        self.export = export
        self.tenant_exporting_permission = tenant_exporting_permission

    def _resolve(self, name: str, service_name: str) -> Any[CloudThingObject]:
        expanded, href = self.link(name)
        if expanded:
            return self.__dict__[name]
        if not href:
            raise ValueError(f"Export does not refer to any {name}.")
        self._assert_service()
        return getattr(self.service.ct, service_name).get_by_link(href)

    def _assert_device_model(self):
        if self.model_type != self.DEVICE_MODEL:
            raise ValueError(f"Export model is not {self.DEVICE_MODEL}: {self.model_type}")

    def get_product(self) -> Any[CloudThingObject]:
        """Get the exported product.

        Returns:
            The Product instance (read from the database if the relation
            was not expanded).

        Raises:
            ValueError if the export's model type is not DEVICE.
        """
        self._assert_device_model()
        return self._resolve('product', 'products')

    def set_product(self, product: str | CloudThingObject):
        """Set the exported product.

        Args:
            product (str|Product):  The product or its link

        Raises:
            ValueError if the export's model type is not DEVICE.
        """
        self._assert_device_model()
        self.set_link('product', product)

    def get_application(self) -> Any[CloudThingObject]:
        """Get the exporting application."""
        return self._resolve('application', 'applications')

    def get_tenant_exporting_permission_export(self) -> Export:
        """Get the export granting the exporting permission."""
        return self._resolve('tenant_exporting_permission_export', 'exports')

    def get_limits(self) -> Any[CloudThingObject] | None:
        """Get the object limiting this export.

        Depending on the `limits_type` this is a Device, Group or Cluster.

        Returns:
            The limiting object read from the database or None if the
            export is not limited.

        Raises:
            ValueError if the limits type is unknown.
        """
        if not self.limits_type:
            return None
        try:
            service_name = self._LIMITS_SERVICES[self.limits_type]
        except KeyError:
            raise ValueError(f"Unexpected limits type: {self.limits_type}") from None
        return self._resolve('limits', service_name)


class Exports(UpdatableResource):
    """Provides access to the Export API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'exports', Export)

    def list(self, **options) -> Tuple[List[Export], ListParams]:
        """List all exports visible to the current tenant."""
        return self.list_by_link(self.resource, **options)

    def list_by_application(self, application_id: str, **options) -> Tuple[List[Export], ListParams]:
        """List the exports of an application."""
        return self.list_by_link(self.build_parent_path('applications', application_id), **options)

    def create_by_application(self, application_id: str, export: Export) -> Export:
        """Create an export of an application."""
        return self.create_by_link(self.build_parent_path('applications', application_id), export)

    def create_by_link(self, href: str, export: Export) -> Export:
        """Create an export within a collection given by link."""
        return self._create_by_link(href, export)

    @deprecated(reason="Use Exports.update_by_link or Export.save instead.")
    def update(self, export: Export) -> Export:
        # pylint: disable=missing-function-docstring
        export._assert_href()  # pylint: disable=protected-access
        return self.update_by_link(export.href, export)
