# =============================================================================
# app/routers/clients.py - Client CRUD Endpoints
# =============================================================================
# Endpoints:
# - GET    /clientes               List clients (ordered by name)
# - POST   /clientes               Create a client
# - GET    /clientes/busca/{termo} Search by name, phone or e-mail
# - GET    /clientes/{id}          Get one client
# - PUT    /clientes/{id}          Replace a client's fields
# - DELETE /clientes/{id}          Delete a client
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from core.models.client import ClientPayload
from core.services.client_service import ClientService

router = APIRouter()


@router.get("")
def list_clients():
    """List every client ordered by name."""
    return ClientService.list_clients()


@router.post("", status_code=201)
def create_client(payload: ClientPayload):
    """
    Create a client.

    Only `nome` is required.
    """
    client = ClientService.create_client(payload)
    return {
        "message": "Cliente cadastrado com sucesso!!",
        "cliente": client,
    }


# Declared before /{client_id} so "busca" is never read as an id
@router.get("/busca/{termo}")
def search_clients(
    termo: Annotated[str, Path(description="Text to find in name, phone or e-mail")],
):
    """Search clients (case-insensitive, at most 20 results)."""
    return ClientService.search_clients(termo)


@router.get("/{client_id}")
def get_client(
    client_id: Annotated[str, Path(description="Client id")],
):
    """Get one client by id."""
    return ClientService.get_client(client_id)


@router.put("/{client_id}")
def update_client(
    client_id: Annotated[str, Path(description="Client id")],
    payload: ClientPayload,
):
    """Replace a client's fields (full-row update)."""
    client = ClientService.update_client(client_id, payload)
    return {
        "message": "Dados do cliente atualizado com sucesso!!",
        "cliente": client,
    }


@router.delete("/{client_id}")
def delete_client(
    client_id: Annotated[str, Path(description="Client id")],
):
    """
    Delete a client.

    Fails with 400 while appointments still reference the client.
    """
    ClientService.delete_client(client_id)
    return {"message": "Cliente deletado com sucesso!"}
