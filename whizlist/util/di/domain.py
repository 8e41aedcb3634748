"""Domain layer DI providers."""

from dishka import Scope, provide

from whizlist.config import AuthSettings, CommentSettings
from whizlist.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    FolderRepository,
    ListMembershipRepository,
    ProductListRepository,
    ProductRepository,
    ProfileRepository,
)
from whizlist.domain.service import (
    AssignmentService,
    BlobStorage,
    CommentLikeService,
    CommentService,
    FolderService,
    ImageService,
    JWTService,
    ProductListService,
    ProductService,
    SearchService,
)
from whizlist.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_like_service(
        self,
        like_repository: CommentLikeRepository,
        comment_repository: CommentRepository,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            like_repository=like_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
        like_service: CommentLikeService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
            like_service=like_service,
            max_length=comment_settings.max_length,
        )

    @provide
    def get_product_service(self, product_repository: ProductRepository) -> ProductService:
        """Provide product domain service."""
        return ProductService(product_repository=product_repository)

    @provide
    def get_product_list_service(
        self,
        list_repository: ProductListRepository,
        membership_repository: ListMembershipRepository,
        product_repository: ProductRepository,
    ) -> ProductListService:
        """Provide list domain service."""
        return ProductListService(
            list_repository=list_repository,
            membership_repository=membership_repository,
            product_repository=product_repository,
        )

    @provide
    def get_folder_service(self, folder_repository: FolderRepository) -> FolderService:
        """Provide folder domain service."""
        return FolderService(folder_repository=folder_repository)

    @provide
    def get_image_service(self, storage: BlobStorage) -> ImageService:
        """Provide product image service."""
        return ImageService(storage=storage)

    @provide
    def get_assignment_service(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        image_service: ImageService,
    ) -> AssignmentService:
        """Provide assignment domain service."""
        return AssignmentService(
            product_service=product_service,
            list_service=list_service,
            image_service=image_service,
        )

    @provide
    def get_search_service(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        folder_service: FolderService,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            product_service=product_service,
            list_service=list_service,
            folder_service=folder_service,
        )
