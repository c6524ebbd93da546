from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_subscription_reconciler
from api.schemas import ErrorResponse, SubscribeRequest, SubscribeResponse
from application.services import SubscriptionReconciler
from domain.models.subscription import Disposition

router = APIRouter(prefix='/api', tags=['subscribe'])

MESSAGES = {
	Disposition.CREATED: "Successfully subscribed! You'll receive a reminder before the deadline.",
	Disposition.UPDATED: 'Settlement added to your subscriptions!',
}


@router.post(
	'/subscribe',
	response_model=SubscribeResponse,
	status_code=status.HTTP_200_OK,
	summary='Subscribe an email to a settlement deadline reminder',
	responses={400: {'model': ErrorResponse}, 500: {'model': ErrorResponse}},
)
async def subscribe(
	reconciler: Annotated[SubscriptionReconciler, Depends(get_subscription_reconciler)],
	body: SubscribeRequest | None = None,
) -> SubscribeResponse:
	body = body or SubscribeRequest()
	disposition = await reconciler.reconcile(
		email=body.email,
		tag=body.settlement_id,
		name=body.settlement_name,
		deadline=body.deadline,
	)
	return SubscribeResponse(success=True, message=MESSAGES[disposition])
