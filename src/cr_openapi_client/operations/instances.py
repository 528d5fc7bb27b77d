"""Instance, endpoint, credential and resource tag operations."""

from .. import models
from ..core.config import RuntimeOptions


class InstanceOperations:
    """Enterprise instance calls, mixed into ``Client``."""

    async def get_instance_with_options(
        self,
        request: models.GetInstanceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetInstanceResponse:
        return await self.do_action(
            "GetInstance", request, models.GetInstanceResponse, runtime, method="GET"
        )

    async def get_instance(
        self, request: models.GetInstanceRequest
    ) -> models.GetInstanceResponse:
        """Get the details of an instance."""
        return await self.get_instance_with_options(request, RuntimeOptions())

    async def get_instance_count_with_options(
        self,
        request: models.GetInstanceCountRequest | None = None,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetInstanceCountResponse:
        return await self.do_action(
            "GetInstanceCount",
            request or models.GetInstanceCountRequest(),
            models.GetInstanceCountResponse,
            runtime,
            method="GET",
        )

    async def get_instance_count(
        self, request: models.GetInstanceCountRequest | None = None
    ) -> models.GetInstanceCountResponse:
        """Count the instances owned by the account."""
        return await self.get_instance_count_with_options(request, RuntimeOptions())

    async def get_instance_usage_with_options(
        self,
        request: models.GetInstanceUsageRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetInstanceUsageResponse:
        return await self.do_action(
            "GetInstanceUsage",
            request,
            models.GetInstanceUsageResponse,
            runtime,
            method="GET",
        )

    async def get_instance_usage(
        self, request: models.GetInstanceUsageRequest
    ) -> models.GetInstanceUsageResponse:
        """Get namespace, repository and chain quota usage of an instance."""
        return await self.get_instance_usage_with_options(request, RuntimeOptions())

    async def list_instance_with_options(
        self,
        request: models.ListInstanceRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListInstanceResponse:
        """Call ListInstance with per-call runtime options."""
        return await self.do_action(
            "ListInstance", request, models.ListInstanceResponse, runtime, method="GET"
        )

    async def list_instance(
        self, request: models.ListInstanceRequest
    ) -> models.ListInstanceResponse:
        """List instances, optionally filtered by name, status or tags."""
        return await self.list_instance_with_options(request, RuntimeOptions())

    async def list_instance_region_with_options(
        self,
        request: models.ListInstanceRegionRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListInstanceRegionResponse:
        return await self.do_action(
            "ListInstanceRegion",
            request,
            models.ListInstanceRegionResponse,
            runtime,
            method="GET",
        )

    async def list_instance_region(
        self, request: models.ListInstanceRegionRequest
    ) -> models.ListInstanceRegionResponse:
        """List the regions where instances can be created."""
        return await self.list_instance_region_with_options(request, RuntimeOptions())

    async def get_instance_endpoint_with_options(
        self,
        request: models.GetInstanceEndpointRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetInstanceEndpointResponse:
        return await self.do_action(
            "GetInstanceEndpoint",
            request,
            models.GetInstanceEndpointResponse,
            runtime,
            method="GET",
        )

    async def get_instance_endpoint(
        self, request: models.GetInstanceEndpointRequest
    ) -> models.GetInstanceEndpointResponse:
        """Get one access endpoint of an instance with its ACL."""
        return await self.get_instance_endpoint_with_options(request, RuntimeOptions())

    async def list_instance_endpoint_with_options(
        self,
        request: models.ListInstanceEndpointRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListInstanceEndpointResponse:
        return await self.do_action(
            "ListInstanceEndpoint",
            request,
            models.ListInstanceEndpointResponse,
            runtime,
            method="GET",
        )

    async def list_instance_endpoint(
        self, request: models.ListInstanceEndpointRequest
    ) -> models.ListInstanceEndpointResponse:
        return await self.list_instance_endpoint_with_options(request, RuntimeOptions())

    async def update_instance_endpoint_status_with_options(
        self,
        request: models.UpdateInstanceEndpointStatusRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UpdateInstanceEndpointStatusResponse:
        return await self.do_action(
            "UpdateInstanceEndpointStatus",
            request,
            models.UpdateInstanceEndpointStatusResponse,
            runtime,
            method="POST",
        )

    async def update_instance_endpoint_status(
        self, request: models.UpdateInstanceEndpointStatusRequest
    ) -> models.UpdateInstanceEndpointStatusResponse:
        """Enable or disable an access endpoint."""
        return await self.update_instance_endpoint_status_with_options(request, RuntimeOptions())

    async def create_instance_endpoint_acl_policy_with_options(
        self,
        request: models.CreateInstanceEndpointAclPolicyRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateInstanceEndpointAclPolicyResponse:
        return await self.do_action(
            "CreateInstanceEndpointAclPolicy",
            request,
            models.CreateInstanceEndpointAclPolicyResponse,
            runtime,
            method="POST",
        )

    async def create_instance_endpoint_acl_policy(
        self, request: models.CreateInstanceEndpointAclPolicyRequest
    ) -> models.CreateInstanceEndpointAclPolicyResponse:
        """Add a CIDR entry to an endpoint whitelist."""
        return await self.create_instance_endpoint_acl_policy_with_options(request, RuntimeOptions())

    async def delete_instance_endpoint_acl_policy_with_options(
        self,
        request: models.DeleteInstanceEndpointAclPolicyRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteInstanceEndpointAclPolicyResponse:
        return await self.do_action(
            "DeleteInstanceEndpointAclPolicy",
            request,
            models.DeleteInstanceEndpointAclPolicyResponse,
            runtime,
            method="POST",
        )

    async def delete_instance_endpoint_acl_policy(
        self, request: models.DeleteInstanceEndpointAclPolicyRequest
    ) -> models.DeleteInstanceEndpointAclPolicyResponse:
        """Remove a CIDR entry from an endpoint whitelist."""
        return await self.delete_instance_endpoint_acl_policy_with_options(request, RuntimeOptions())

    async def get_instance_vpc_endpoint_with_options(
        self,
        request: models.GetInstanceVpcEndpointRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetInstanceVpcEndpointResponse:
        return await self.do_action(
            "GetInstanceVpcEndpoint",
            request,
            models.GetInstanceVpcEndpointResponse,
            runtime,
            method="GET",
        )

    async def get_instance_vpc_endpoint(
        self, request: models.GetInstanceVpcEndpointRequest
    ) -> models.GetInstanceVpcEndpointResponse:
        return await self.get_instance_vpc_endpoint_with_options(request, RuntimeOptions())

    async def create_instance_vpc_endpoint_linked_vpc_with_options(
        self,
        request: models.CreateInstanceVpcEndpointLinkedVpcRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.CreateInstanceVpcEndpointLinkedVpcResponse:
        return await self.do_action(
            "CreateInstanceVpcEndpointLinkedVpc",
            request,
            models.CreateInstanceVpcEndpointLinkedVpcResponse,
            runtime,
            method="POST",
        )

    async def create_instance_vpc_endpoint_linked_vpc(
        self, request: models.CreateInstanceVpcEndpointLinkedVpcRequest
    ) -> models.CreateInstanceVpcEndpointLinkedVpcResponse:
        """Attach a VPC to the instance's VPC endpoint."""
        return await self.create_instance_vpc_endpoint_linked_vpc_with_options(request, RuntimeOptions())

    async def delete_instance_vpc_endpoint_linked_vpc_with_options(
        self,
        request: models.DeleteInstanceVpcEndpointLinkedVpcRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.DeleteInstanceVpcEndpointLinkedVpcResponse:
        return await self.do_action(
            "DeleteInstanceVpcEndpointLinkedVpc",
            request,
            models.DeleteInstanceVpcEndpointLinkedVpcResponse,
            runtime,
            method="POST",
        )

    async def delete_instance_vpc_endpoint_linked_vpc(
        self, request: models.DeleteInstanceVpcEndpointLinkedVpcRequest
    ) -> models.DeleteInstanceVpcEndpointLinkedVpcResponse:
        """Detach a VPC from the instance's VPC endpoint."""
        return await self.delete_instance_vpc_endpoint_linked_vpc_with_options(request, RuntimeOptions())

    async def get_authorization_token_with_options(
        self,
        request: models.GetAuthorizationTokenRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.GetAuthorizationTokenResponse:
        """Call GetAuthorizationToken; ``ExpireTime`` in the body is in milliseconds."""
        return await self.do_action(
            "GetAuthorizationToken",
            request,
            models.GetAuthorizationTokenResponse,
            runtime,
            method="GET",
        )

    async def get_authorization_token(
        self, request: models.GetAuthorizationTokenRequest
    ) -> models.GetAuthorizationTokenResponse:
        """Get a temporary docker login token for an instance."""
        return await self.get_authorization_token_with_options(request, RuntimeOptions())

    async def reset_login_password_with_options(
        self,
        request: models.ResetLoginPasswordRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ResetLoginPasswordResponse:
        return await self.do_action(
            "ResetLoginPassword",
            request,
            models.ResetLoginPasswordResponse,
            runtime,
            method="POST",
        )

    async def reset_login_password(
        self, request: models.ResetLoginPasswordRequest
    ) -> models.ResetLoginPasswordResponse:
        """Reset the fixed docker login password of an instance."""
        return await self.reset_login_password_with_options(request, RuntimeOptions())

    async def change_resource_group_with_options(
        self,
        request: models.ChangeResourceGroupRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ChangeResourceGroupResponse:
        return await self.do_action(
            "ChangeResourceGroup",
            request,
            models.ChangeResourceGroupResponse,
            runtime,
            method="POST",
        )

    async def change_resource_group(
        self, request: models.ChangeResourceGroupRequest
    ) -> models.ChangeResourceGroupResponse:
        """Move an instance to another resource group."""
        return await self.change_resource_group_with_options(request, RuntimeOptions())

    async def list_tag_resources_with_options(
        self,
        request: models.ListTagResourcesRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.ListTagResourcesResponse:
        return await self.do_action(
            "ListTagResources",
            request,
            models.ListTagResourcesResponse,
            runtime,
            method="GET",
        )

    async def list_tag_resources(
        self, request: models.ListTagResourcesRequest
    ) -> models.ListTagResourcesResponse:
        return await self.list_tag_resources_with_options(request, RuntimeOptions())

    async def tag_resources_with_options(
        self,
        request: models.TagResourcesRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.TagResourcesResponse:
        return await self.do_action(
            "TagResources", request, models.TagResourcesResponse, runtime, method="POST"
        )

    async def tag_resources(
        self, request: models.TagResourcesRequest
    ) -> models.TagResourcesResponse:
        """Attach tags to instances."""
        return await self.tag_resources_with_options(request, RuntimeOptions())

    async def untag_resources_with_options(
        self,
        request: models.UntagResourcesRequest,
        runtime: RuntimeOptions | None = None,
    ) -> models.UntagResourcesResponse:
        return await self.do_action(
            "UntagResources",
            request,
            models.UntagResourcesResponse,
            runtime,
            method="POST",
        )

    async def untag_resources(
        self, request: models.UntagResourcesRequest
    ) -> models.UntagResourcesResponse:
        """Detach tags from instances."""
        return await self.untag_resources_with_options(request, RuntimeOptions())
