from file_detector.main import run

run()
