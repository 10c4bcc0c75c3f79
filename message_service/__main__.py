from message_service.launcher import run

if __name__ == "__main__":
    run()
