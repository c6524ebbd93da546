from pathlib import Path

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import FileResponse

from config.settings import get_settings

router = APIRouter(tags=['static'])

INDEX_FILE = 'mortgage-calculator.html'


@router.get('/', include_in_schema=False)
@router.get('/index.html', include_in_schema=False)
async def index() -> FileResponse:
	page = Path(get_settings().ASSETS_DIR) / INDEX_FILE
	if not page.is_file():
		raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Not Found')
	return FileResponse(page, media_type='text/html')
