"""User-facing messages shared by the parser and the commands."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"

MESSAGE_INVALID_CANDIDATE_DISPLAYED_INDEX = "The candidate index provided is invalid"
MESSAGE_INVALID_POSITION_DISPLAYED_INDEX = "The position index provided is invalid"
MESSAGE_INVALID_INTERVIEW_DISPLAYED_INDEX = "The interview index provided is invalid"

MESSAGE_CANDIDATES_LISTED_OVERVIEW = "%d candidates listed!"
MESSAGE_POSITIONS_LISTED_OVERVIEW = "%d positions listed!"
MESSAGE_INTERVIEWS_LISTED_OVERVIEW = "%d interviews listed!"

MESSAGE_POSITION_NOT_FOUND = "Position not found: %s"
MESSAGE_CANDIDATE_NOT_FOUND = "Candidate not found: %s"
