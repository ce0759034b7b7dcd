# =============================================================================
# app/routers/catalog.py - Service Catalog Endpoints
# =============================================================================
# Endpoints:
# - GET    /services                        List services (ordered by name)
# - POST   /services                        Create a service
# - GET    /services/populares              Services flagged as popular
# - GET    /services/categoria/{categoria}  Services in one category
# - GET    /services/{id}                   Get one service
# - PUT    /services/{id}                   Replace a service
# - DELETE /services/{id}                   Delete a service
#
# The /{id} routes are declared last: FastAPI matches in declaration order
# and "populares" would otherwise be taken for an id.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from core.models.service import ServicePayload
from core.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/populares")
def list_popular():
    """List services flagged as popular."""
    return CatalogService.list_popular()


@router.get("/categoria/{categoria}")
def list_by_category(
    categoria: Annotated[str, Path(description="cabelo, unhas or estetica")],
):
    """List services in one category."""
    return CatalogService.list_by_category(categoria)


@router.get("")
def list_services():
    """List every service ordered by name."""
    return CatalogService.list_services()


@router.post("", status_code=201)
def create_service(payload: ServicePayload):
    """
    Create a service.

    `nome`, `descricao`, `preco`, `duracao_minutos` and `categoria` are required.
    """
    service = CatalogService.create_service(payload)
    return {
        "message": "Serviço cadastrado com sucesso!",
        "servico": service,
    }


@router.get("/{service_id}")
def get_service(
    service_id: Annotated[str, Path(description="Service id")],
):
    """Get one service by id."""
    return CatalogService.get_service(service_id)


@router.put("/{service_id}")
def update_service(
    service_id: Annotated[str, Path(description="Service id")],
    payload: ServicePayload,
):
    """Replace a service's fields."""
    service = CatalogService.update_service(service_id, payload)
    return {
        "message": "Serviço atualizado com sucesso!",
        "servico": service,
    }


@router.delete("/{service_id}")
def delete_service(
    service_id: Annotated[str, Path(description="Service id")],
):
    """Delete a service."""
    CatalogService.delete_service(service_id)
    return {"message": "Serviço deletado com sucesso!"}
