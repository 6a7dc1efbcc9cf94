from overlay_position.cli import main

raise SystemExit(main())
