from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubscribeRequest(BaseModel):
	# Presence and shape are checked by the reconciler so that it owns the
	# client-error messages.
	email: str | None = None
	settlement_id: str | None = Field(default=None, description='Settlement tag to subscribe to')
	settlement_name: str | None = Field(default=None, description='Display name of the settlement')
	deadline: str | None = Field(default=None, description='Claim deadline, free-form date string')

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		json_schema_extra={
			'example': {
				'email': 'user@example.com',
				'settlementId': 'acme-data-breach',
				'settlementName': 'Acme Data Breach Settlement',
				'deadline': '2026-12-31',
			}
		},
	)
