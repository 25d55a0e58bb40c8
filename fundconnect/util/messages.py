""" All Error and Success Message declare here... """


# SUCCESS MESSAGES
SUCCESS = {
    "SIGN_OUT_SUCCESS"              :   "Signed out successfully.",
    "VERIFICATION_SENT"             :   "Verification email sent.",
    "EMAIL_VERIFIED"                :   "Email verified.",
    "FUND_UPDATE_SUCCESS"           :   "Fund updated successfully.",
    "FUND_DELETE_SUCCESS"           :   "Fund deleted successfully.",
    "INTEREST_REMOVED"              :   "Interest removed.",
    "STORAGE_POLICIES_OK"           :   "Storage policies are correctly configured",
}


# ERROR MESSAGES
ERROR = {
    # Request Errors
    "INVALID_REQUEST"               :   "Request body is required",

    # Auth Errors
    "NOT_AUTHENTICATED"             :   "You need to be logged in to perform this action",
    "INVALID_CREDENTIALS"           :   "Invalid email or password.",
    "EMAIL_REQUIRED"                :   "Email is required.",
    "PASSWORD_REQUIRED"             :   "Password is required.",
    "PASSWORD_MIN"                  :   "Password must be at least {} characters.",
    "EMAIL_ALREADY_REGISTERED"      :   "An account with this email already exists.",
    "INVALID_ROLE"                  :   "Role must be one of: {roles}",
    "NAME_REQUIRED"                 :   "Name is required.",
    "USER_NOT_FOUND"                :   "User not found.",
    "ROLE_NOT_ALLOWED"              :   "This action requires the {role} role.",
    "EMAIL_ALREADY_VERIFIED"        :   "This email address is already verified.",
    "VERIFICATION_TOKEN_REQUIRED"   :   "Verification token is required.",
    "VERIFICATION_TOKEN_EXPIRED"    :   "This verification link has expired. Request a new one.",
    "VERIFICATION_TOKEN_INVALID"    :   "This verification link is invalid.",

    # Investor / Invitation Errors
    "INVESTOR_NOT_FOUND"            :   "Investor not found",
    "INVESTOR_ACCESS_DENIED"        :   "This investor is not connected to you.",
    "INVESTORS_FETCH_FAILED"        :   "Failed to fetch investors",
    "INVITATION_CODE_INVALID"       :   "Invitation code is not valid.",
    "INVITATION_CODE_EXPIRED"       :   "Invitation code has expired.",
    "INVITATION_CODE_USED"          :   "Invitation code has already been used.",
    "INVITATION_CODE_AGENTS"        :   "Invitation codes are only for investor accounts.",
    "INVITATION_CREATE_FAILED"      :   "An error occurred while creating the invitation",
    "INVESTOR_NAME_REQUIRED"        :   "Investor name is required.",
    "INVESTOR_EMAIL_REQUIRED"       :   "Investor email is required.",

    # Fund Errors
    "INVALID_FUND_ID"               :   "Fund ID is required.",
    "FUND_NAME_REQUIRED"            :   "Fund name is required.",
    "FUND_NAME_MIN"                 :   "Fund name must be at least {} characters.",
    "FUND_NOT_FOUND"                :   "Fund with given ID does not exist.",
    "FUND_NUMBER_INVALID"           :   "{field} must be a non-negative number.",
    "FUND_CREATE_FAILED"            :   "Unable to create fund. Please try again.",
    "FUND_UPDATE_FAILED"            :   "Unable to update fund.",
    "FUND_DELETE_FAILED"            :   "Unable to delete fund.",
    "FUND_NOT_OWNED"                :   "You can only manage funds you uploaded.",

    # Fund Document Errors
    "DOCUMENT_FILE_REQUIRED"        :   "File is required.",
    "DOCUMENT_INVALID_FILE"         :   "Invalid file name.",
    "DOCUMENT_INVALID_TYPE"         :   "Document type must be one of: {types}",
    "DOCUMENT_UPLOAD_FAILED"        :   "Unable to upload document.",
    "UNSUPPORTED_FILE_FORMAT"       :   "Unsupported file format: {file_extension}.",

    # Conversation Errors
    "AGENT_ID_REQUIRED"             :   "No agent ID provided",
    "AGENT_NOT_FOUND"               :   "Agent does not exist.",
    "CONVERSATION_NOT_FOUND"        :   "Conversation not found",
    "CONVERSATION_ACCESS_DENIED"    :   "You don't have permission to view this conversation",
    "CONVERSATION_CHECK_FAILED"     :   "Error checking conversations",
    "CONVERSATION_CREATE_FAILED"    :   "Failed to create conversation",
    "CONVERSATIONS_FETCH_FAILED"    :   "Error fetching conversations",
    "MESSAGE_CONTENT_REQUIRED"      :   "Message content is required.",
    "MESSAGE_TOO_LONG"              :   "Message must not exceed {} characters.",
    "MESSAGE_SEND_FAILED"           :   "Failed to send message",
    "MARK_READ_FAILED"              :   "Failed to mark conversation as read",

    # Interest Errors
    "INTEREST_NOT_FOUND"            :   "Interest not found.",
    "INTEREST_ALREADY_EXISTS"       :   "You have already expressed interest in this fund.",
    "INTEREST_CONFIRM_REQUIRED"     :   "Are you sure you want to remove your interest in this fund? Pass confirm=true.",
    "INTEREST_NOT_OWNED"            :   "You can only remove your own interests.",
    "INTEREST_CREATE_FAILED"        :   "An error occurred while expressing interest. Please try again.",
    "INTEREST_DELETE_FAILED"        :   "An error occurred while removing your interest. Please try again.",
    "INTERESTS_FETCH_FAILED"        :   "An error occurred while loading interests",

    # Storage Errors
    "STORAGE_BUCKET_MISSING"        :   "The {bucket} bucket does not exist. Please contact the administrator.",
    "STORAGE_POLICY_FAILED"         :   "Failed to upload test file. The storage policies may not be properly configured.",
    "STORAGE_UNEXPECTED"            :   "An unexpected error occurred",
}
