"""Application layer DI providers."""

from dishka import Scope, provide

from whizlist.application.usecase.assignment import (
    CopyProductUseCase,
    MoveProductUseCase,
    SetProductListsUseCase,
)
from whizlist.application.usecase.collection import (
    CreateFolderUseCase,
    CreateListUseCase,
    DeleteFolderUseCase,
    DeleteListUseCase,
    GetFoldersUseCase,
    GetListsUseCase,
    UpdateFolderUseCase,
    UpdateListUseCase,
)
from whizlist.application.usecase.comment import (
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetThreadUseCase,
    PostCommentUseCase,
    ToggleLikeUseCase,
)
from whizlist.application.usecase.product import (
    AddProductUseCase,
    DeleteProductUseCase,
    EnhanceProductUseCase,
    ListProductsUseCase,
    TogglePinUseCase,
    UpdateProductUseCase,
)
from whizlist.application.usecase.search import SearchUseCase
from whizlist.config import CommentSettings
from whizlist.domain.service import (
    AssignmentService,
    CommentLikeService,
    CommentService,
    ContentExtractor,
    FolderService,
    ImageService,
    JWTService,
    ProductListService,
    ProductService,
    SearchService,
)
from whizlist.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, comment_service: CommentService, jwt_service: JWTService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(comment_service=comment_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_post_comment_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> PostCommentUseCase:
        """Provide post comment use case."""
        return PostCommentUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, like_service: CommentLikeService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    # Product use cases
    @provide(scope=Scope.REQUEST)
    def get_add_product_use_case(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
        content_extractor: ContentExtractor,
    ) -> AddProductUseCase:
        """Provide add product use case."""
        return AddProductUseCase(
            product_service=product_service,
            list_service=list_service,
            assignment_service=assignment_service,
            content_extractor=content_extractor,
        )

    @provide(scope=Scope.REQUEST)
    def get_enhance_product_use_case(
        self,
        product_service: ProductService,
        content_extractor: ContentExtractor,
        image_service: ImageService,
    ) -> EnhanceProductUseCase:
        """Provide enhance product use case."""
        return EnhanceProductUseCase(
            product_service=product_service,
            content_extractor=content_extractor,
            image_service=image_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_products_use_case(
        self, product_service: ProductService, list_service: ProductListService
    ) -> ListProductsUseCase:
        """Provide list products use case."""
        return ListProductsUseCase(
            product_service=product_service, list_service=list_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_product_use_case(
        self, product_service: ProductService
    ) -> UpdateProductUseCase:
        """Provide update product use case."""
        return UpdateProductUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_pin_use_case(self, product_service: ProductService) -> TogglePinUseCase:
        """Provide toggle pin use case."""
        return TogglePinUseCase(product_service=product_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_product_use_case(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        image_service: ImageService,
    ) -> DeleteProductUseCase:
        """Provide delete product use case."""
        return DeleteProductUseCase(
            product_service=product_service,
            list_service=list_service,
            image_service=image_service,
        )

    # Assignment use cases
    @provide(scope=Scope.REQUEST)
    def get_move_product_use_case(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> MoveProductUseCase:
        """Provide move product use case."""
        return MoveProductUseCase(
            product_service=product_service,
            list_service=list_service,
            assignment_service=assignment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_copy_product_use_case(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> CopyProductUseCase:
        """Provide copy product use case."""
        return CopyProductUseCase(
            product_service=product_service,
            list_service=list_service,
            assignment_service=assignment_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_set_product_lists_use_case(
        self,
        product_service: ProductService,
        list_service: ProductListService,
        assignment_service: AssignmentService,
    ) -> SetProductListsUseCase:
        """Provide bulk list reconciliation use case."""
        return SetProductListsUseCase(
            product_service=product_service,
            list_service=list_service,
            assignment_service=assignment_service,
        )

    # List use cases
    @provide(scope=Scope.REQUEST)
    def get_create_list_use_case(
        self, list_service: ProductListService, folder_service: FolderService
    ) -> CreateListUseCase:
        """Provide create list use case."""
        return CreateListUseCase(list_service=list_service, folder_service=folder_service)

    @provide(scope=Scope.REQUEST)
    def get_get_lists_use_case(self, list_service: ProductListService) -> GetListsUseCase:
        """Provide get lists use case."""
        return GetListsUseCase(list_service=list_service)

    @provide(scope=Scope.REQUEST)
    def get_update_list_use_case(
        self, list_service: ProductListService, folder_service: FolderService
    ) -> UpdateListUseCase:
        """Provide update list use case."""
        return UpdateListUseCase(list_service=list_service, folder_service=folder_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_list_use_case(
        self, list_service: ProductListService
    ) -> DeleteListUseCase:
        """Provide delete list use case."""
        return DeleteListUseCase(list_service=list_service)

    # Folder use cases
    @provide(scope=Scope.REQUEST)
    def get_create_folder_use_case(
        self, folder_service: FolderService
    ) -> CreateFolderUseCase:
        """Provide create folder use case."""
        return CreateFolderUseCase(folder_service=folder_service)

    @provide(scope=Scope.REQUEST)
    def get_get_folders_use_case(
        self, folder_service: FolderService, list_service: ProductListService
    ) -> GetFoldersUseCase:
        """Provide get folders use case."""
        return GetFoldersUseCase(folder_service=folder_service, list_service=list_service)

    @provide(scope=Scope.REQUEST)
    def get_update_folder_use_case(
        self, folder_service: FolderService
    ) -> UpdateFolderUseCase:
        """Provide update folder use case."""
        return UpdateFolderUseCase(folder_service=folder_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_folder_use_case(
        self, folder_service: FolderService, list_service: ProductListService
    ) -> DeleteFolderUseCase:
        """Provide delete folder use case."""
        return DeleteFolderUseCase(folder_service=folder_service, list_service=list_service)

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_use_case(self, search_service: SearchService) -> SearchUseCase:
        """Provide search use case."""
        return SearchUseCase(search_service=search_service)
