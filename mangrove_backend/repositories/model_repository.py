# mangrove_backend/repositories/model_repository.py
import hashlib
import json
import os
import threading
from urllib.parse import urljoin, urlparse
import numpy as np
from ..utils.exceptions import ModelNotConfiguredError
from ..utils.logger import setup_logger

def is_remote(location):
    return urlparse(location).scheme in ('http', 'https')

def download(url, fname, cache_subdir='models'):
    """Fetch `url` into ~/.keras/<cache_subdir>/<fname>; get_file skips files already there."""
    import tensorflow as tf
    return tf.keras.utils.get_file(fname, origin=url, cache_subdir=cache_subdir)

def read_keras_model(path):
    import tensorflow as tf
    return tf.keras.models.load_model(path, compile=False)

def read_tfjs_model(path):
    # Weight shards are resolved relative to the directory holding model.json
    import tensorflowjs as tfjs
    return tfjs.converters.load_keras_model(path)

def fetch_tfjs_model(url):
    """Download a TF.js Layers model.json and every weight shard it lists into one directory."""
    cache_subdir = os.path.join('models', 'tfjs-' + hashlib.sha1(url.encode('utf-8')).hexdigest()[:12])
    manifest_path = download(url, os.path.basename(urlparse(url).path), cache_subdir)

    with open(manifest_path) as f:
        manifest = json.load(f)
    for group in manifest.get('weightsManifest', []):
        for path in group.get('paths', []):
            download(urljoin(url, path), path, cache_subdir)
    return manifest_path

def load_keras_model(location):
    """Load a model from a local path or an http(s) URL.

    `.json` locations are TF.js Layers models; anything else is a Keras file.
    """
    if urlparse(location).path.endswith('.json'):
        path = fetch_tfjs_model(location) if is_remote(location) else location
        return read_tfjs_model(path)

    if is_remote(location):
        fname = os.path.basename(urlparse(location).path) or 'model.keras'
        location = download(location, fname)
    return read_keras_model(location)

class ModelRepository:
    def __init__(self, model_url=None, image_size=150, loader=load_keras_model):
        self.models = {}  # Cache for loaded models, keyed by location
        self.model_url = model_url
        self.image_size = image_size
        self.loader = loader
        self.lock = threading.Lock()
        self.logger = setup_logger()

    def load_model(self, location=None):
        """Repository: Return the model at `location`, loading it on first use"""
        location = location or self.model_url
        if not location:
            raise ModelNotConfiguredError("MODEL_URL is not configured")

        model = self.models.get(location)
        if model is not None:
            return model

        with self.lock:
            if location not in self.models:
                try:
                    self.models[location] = self.loader(location)
                    self.logger.info(f"Repository: Loaded model from {location}")
                except Exception as e:
                    self.logger.error(f"Repository: Error loading model from {location}: {str(e)}")
                    raise
            return self.models[location]

    def unload_model(self, location=None):
        """Repository: Drop a cached model so the next prediction reloads it"""
        location = location or self.model_url
        with self.lock:
            if self.models.pop(location, None) is not None:
                self.logger.info(f"Repository: Unloaded model {location}")

    def predict(self, pixels):
        """Repository: Run the model on a (size, size, 3) uint8 buffer and return the class index"""
        model = self.load_model()

        normalized = np.asarray(pixels, dtype=np.float32) / 255.0
        batch = normalized.reshape((1, self.image_size, self.image_size, 3))
        try:
            predictions = np.asarray(model.predict(batch, verbose=0))
            scores = predictions.reshape(-1)
            # np.argmax returns the first maximum, so ties go to the lowest index
            class_idx = int(np.argmax(scores))
        except Exception as e:
            self.logger.error(f"Repository: Prediction error: {str(e)}")
            raise
        finally:
            del normalized, batch

        self.logger.info(f"Repository: Predicted class index {class_idx}")
        return class_idx
