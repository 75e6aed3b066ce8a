# pro_mode_prompting/services/prompting/styles/editorial.py
# Magazine-quality look: professional body and prime lens, intentional framing.
# Keep phone vocabulary out of these templates; the validator treats a mix as a contradiction.

INTRO_EDITORIAL = (
    "Professional editorial photograph of the person shown in the reference images. "
    "Preserve their exact facial features, skin tone, hair and body proportions so they stay "
    "instantly recognizable, and change only the outfit, pose, setting and lighting described below."
)

INTRO_EDITORIAL_NO_REFERENCE = (
    "Professional editorial photograph of one consistent subject with natural, realistic features. "
    "Keep the subject's identity and body proportions coherent while the scene is built as described below."
)

CAMERA_EDITORIAL = (
    "Camera: Professional editorial photography shot on a Canon EOS R5 or Sony A7R V body with an "
    "85mm prime lens, aperture held between f/2 and f/4 for gentle background separation. "
    "Camera positioned 2 to 3 meters from the subject at chest height. "
    "Symmetrical, balanced framing from mid-thigh up with the subject centered, "
    "crisp magazine-spread detail and true-to-life color."
)
