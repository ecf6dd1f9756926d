import logging

from flask import Flask
from flask_cors import CORS
from controllers.board_controller import router as board_routes
from controllers.health_controller import router as health_routes
from database import Base, CORS_ORIGINS, LOG_LEVEL, engine
import models.scrabble_board  # noqa: F401  register tables
import models.word_play_board  # noqa: F401

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

Base.metadata.create_all(bind=engine)

app = Flask(__name__)
CORS(app, origins=CORS_ORIGINS)
app.register_blueprint(board_routes, url_prefix="/api")
app.register_blueprint(health_routes, url_prefix="/actuator")

if __name__ == "__main__":
    app.run(debug=True)
