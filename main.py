from mangrove_backend import create_app
from mangrove_backend.utils.logger import setup_logger

app = create_app()
logger = setup_logger()

if __name__ == '__main__':
    logger.info("Starting Mangrove Backend")
    if app.config['MODEL_URL']:
        # Warm the model cache so the first prediction does not pay for the load
        app.extensions['model_repository'].load_model()
    else:
        logger.warning("MODEL_URL is not set; /api/v1/predict will fail until it is configured")
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'], threaded=True)
