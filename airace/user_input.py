# user input, like quit, restart, recording, etc.
# Separate from car_command which is just for controlling car

class user_input():
    def __init__(self):
        self.restart_car=False # sends the car back to its spawn point through the reset sequence
        self.toggle_recording=False # starts or stops CSV recording
        self.quit=False # quit input, mapped to ESC or closing the window
